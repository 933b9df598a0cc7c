"""TypeScript rendering for extracted enum schemas.

Each schema becomes a frozen const object, a union type of its values and
a label lookup keyed by the const members::

    export const Status = {
      /** Active account */
      Active: "active",
    } as const;

    export type Status = (typeof Status)[keyof typeof Status];

    export const StatusLabels: Record<Status, string> = {
      [Status.Active]: "Active account",
    };
"""

import json
from typing import Literal

from .models import EnumSchema

QuoteStyle = Literal["single", "double"]

QUOTE_STYLES: tuple[str, ...] = ("single", "double")

GENERATOR_NAME = "openapi-ts-enumgen"

INDENT = "  "


def quote(text: str, style: str = "double") -> str:
    """Quote a string literal in the requested style.

    Raises:
        ValueError: If ``style`` is not "single" or "double".
    """
    if style == "double":
        return json.dumps(text, ensure_ascii=False)
    if style == "single":
        escaped = text.replace("\\", "\\\\").replace("'", "\\'")
        escaped = escaped.replace("\n", "\\n").replace("\r", "\\r")
        return f"'{escaped}'"
    msg = f"Unsupported quote style: {style!r} (expected one of {', '.join(QUOTE_STYLES)})"
    raise ValueError(msg)


def doc_lines(text: str) -> list[str]:
    """Non-blank, trimmed lines of a free-text annotation."""
    return [line.strip() for line in text.strip().splitlines() if line.strip()]


def _comment_safe(text: str) -> str:
    return text.replace("*/", "*\\/")


def see_reference(schema_name: str, source_base: str) -> str:
    """Cross-reference back to the schema definition."""
    return f"OpenAPI components/schemas/{schema_name} ({source_base})"


def render_jsdoc(schema: EnumSchema, source_base: str) -> list[str]:
    """Render the doc block preceding a schema's const object."""
    lines = ["/**"]

    description = doc_lines(schema.description)
    if description:
        title, *body = description
        lines.append(f" * {_comment_safe(title)}")
        if body:
            lines.append(" *")
            lines.extend(f" * {_comment_safe(line)}" for line in body)
        lines.append(" *")

    if schema.deprecated:
        lines.append(" * @deprecated")
    if schema.since:
        lines.append(f" * @since {_comment_safe(schema.since.strip())}")
    lines.append(f" * @see {_comment_safe(see_reference(schema.name, source_base))}")
    lines.append(" */")
    return lines


def render_schema(schema: EnumSchema, source_base: str, style: str = "double") -> str:
    """Render the const object, union type and label map of one schema."""
    name = schema.name
    lines = render_jsdoc(schema, source_base)

    lines.append(f"export const {name} = {{")
    for member in schema.members:
        lines.append(f"{INDENT}/** {_comment_safe(member.label)} */")
        lines.append(f"{INDENT}{member.key}: {quote(member.value, style)},")
    lines.append("} as const;")
    lines.append("")

    lines.append(f"export type {name} = (typeof {name})[keyof typeof {name}];")
    lines.append("")

    lines.append(f"export const {name}Labels: Record<{name}, string> = {{")
    for member in schema.members:
        lines.append(f"{INDENT}[{name}.{member.key}]: {quote(member.label, style)},")
    lines.append("};")

    return "\n".join(lines)


def render_typescript(
    schemas: list[EnumSchema],
    source_base: str,
    quote_style: QuoteStyle = "double",
) -> str:
    """Render a complete TypeScript module for the given schemas.

    Args:
        schemas: Schemas in output order.
        source_base: Base name of the source document, used in comments.
        quote_style: "single" or "double".

    Returns:
        Module text ending with a newline.
    """
    if quote_style not in QUOTE_STYLES:
        msg = f"Unsupported quote style: {quote_style!r}"
        raise ValueError(msg)

    header = [
        f"// Code generated by {GENERATOR_NAME}. DO NOT EDIT.",
        f"// Source: {source_base}",
    ]
    blocks = ["\n".join(header)]
    blocks.extend(render_schema(schema, source_base, quote_style) for schema in schemas)

    return "\n\n".join(blocks) + "\n"
