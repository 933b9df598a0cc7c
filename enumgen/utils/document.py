"""OpenAPI document loading and tolerant node access.

Documents are composed (not constructed) with PyYAML so the walker sees the
representation graph: ``MappingNode``, ``SequenceNode`` and ``ScalarNode``.
Composing keeps source marks on every node, which is what lets inline
comments be recovered later as member labels.

All accessors are total. A missing key or a node of the wrong kind yields
``None`` (or an empty string for scalar text) instead of raising, so
documents without schema definitions simply produce no enums.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Raised when a source document cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def parse_document(text: str, source: str = "<string>") -> yaml.Node | None:
    """Compose a YAML (or JSON) document into a node graph.

    Args:
        text: Document contents.
        source: Name used in error messages.

    Returns:
        Root node of the document, or None for an empty document.

    Raises:
        DocumentError: If the text is not well-formed YAML.
    """
    try:
        # Composing from a str keeps the buffer on every mark
        return yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise DocumentError(source, str(e)) from e


def load_document(path: Path) -> yaml.Node | None:
    """Read and compose a document from disk.

    Raises:
        OSError: If the file cannot be read.
        DocumentError: If the file is not UTF-8 or not well-formed YAML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentError(str(path), f"not valid UTF-8 ({e})") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return parse_document(text, str(path))


def is_mapping(node: object) -> bool:
    return isinstance(node, yaml.MappingNode)


def is_sequence(node: object) -> bool:
    return isinstance(node, yaml.SequenceNode)


def is_scalar(node: object) -> bool:
    return isinstance(node, yaml.ScalarNode)


def mapping_get(node: yaml.Node | None, key: str) -> yaml.Node | None:
    """Return the value node for ``key``, or None.

    The first matching key wins when a mapping repeats a key.
    """
    if not is_mapping(node):
        return None

    for key_node, value_node in node.value:
        if is_scalar(key_node) and key_node.value == key:
            return value_node

    return None


def scalar_value(node: yaml.Node | None) -> str:
    """Return the raw text of a scalar node, or "" for anything else."""
    if not is_scalar(node):
        return ""
    return node.value


def find_schemas(root: yaml.Node | None) -> yaml.Node | None:
    """Locate the ``components.schemas`` mapping of an OpenAPI document."""
    schemas = mapping_get(mapping_get(root, "components"), "schemas")

    if not is_mapping(schemas):
        return None

    return schemas


def iter_definitions(schemas: yaml.Node | None) -> Iterator[tuple[str, yaml.Node]]:
    """Yield ``(name, definition)`` pairs in declaration order.

    Entries whose key is not a non-empty scalar are skipped.
    """
    if not is_mapping(schemas):
        return

    for key_node, value_node in schemas.value:
        name = scalar_value(key_node)
        if not name:
            logger.debug("Skipping schema entry without a usable name")
            continue
        yield name, value_node
