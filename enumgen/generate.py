#!/usr/bin/env python3
"""Generate TypeScript enum constants from an OpenAPI document.

Reads components.schemas from a YAML or JSON OpenAPI document, extracts
every string enum and writes a TypeScript module with one const object,
union type and label map per enum. Inline comments on enum entries become
member labels.

Usage:
    enumgen -input openapi.yaml -output enums.ts
    enumgen openapi.yaml enums.ts --quote single --no-sort
"""

from __future__ import annotations

import argparse
import copy
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from enumgen.utils.assembler import ExtractionStats, SchemaAssembler
from enumgen.utils.document import DocumentError, load_document
from enumgen.utils.identifier import RESERVED_IDENTIFIERS, extend_reserved
from enumgen.utils.models import EnumSchema
from enumgen.utils.ordering import order_schemas
from enumgen.utils.ts_renderer import QUOTE_STYLES, render_typescript

console = Console()
logger = logging.getLogger(__name__)


# Default configuration
DEFAULT_CONFIG = {
    "output": {
        "quote": "double",
        "sort": True,
    },
    "naming": {
        "extra_reserved_words": [],
    },
}


def load_config(config_path: Path | None = None) -> dict:
    """Load configuration from YAML file or use defaults."""
    if config_path and config_path.exists():
        with config_path.open() as f:
            config = yaml.safe_load(f) or {}
            logger.debug("Loaded configuration from %s", config_path)
            return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), config)
    return copy.deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        # An empty section keeps its defaults
        if value is None and isinstance(result.get(key), dict):
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def extract_schemas(
    input_path: Path,
    config: dict[str, Any],
) -> tuple[list[EnumSchema], ExtractionStats]:
    """Load a document and return its enum schemas in output order.

    Raises:
        OSError: If the input cannot be read.
        DocumentError: If the input is not well-formed YAML or JSON.
    """
    extra_words = config["naming"].get("extra_reserved_words") or []
    reserved = extend_reserved(extra_words) if extra_words else RESERVED_IDENTIFIERS

    root = load_document(input_path)
    assembler = SchemaAssembler(reserved)
    schemas = assembler.assemble(root)

    return order_schemas(schemas, sort=bool(config["output"]["sort"])), assembler.stats


def write_output(text: str, output_path: Path) -> None:
    """Write generated text, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(text)


def print_summary(stats: ExtractionStats) -> None:
    """Print extraction summary to console."""
    table = Table(title="Enum Extraction Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Schema Definitions", str(stats.definitions_seen))
    table.add_row("String Enums", str(stats.enums_extracted))
    table.add_row("Skipped Definitions", str(stats.definitions_skipped))
    table.add_row("Members", str(stats.members_extracted))
    table.add_row("Non-scalar Entries Dropped", str(stats.non_scalar_entries_dropped))
    table.add_row("Key Collisions Resolved", str(stats.key_collisions))

    console.print(table)


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enumgen",
        description="Generate TypeScript enum constants from OpenAPI string enums",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_pos", nargs="?", metavar="INPUT", help="Input OpenAPI YAML/JSON")
    parser.add_argument("output_pos", nargs="?", metavar="OUTPUT", help="Output .ts file")
    parser.add_argument(
        "--input",
        "-input",
        type=Path,
        help="Path to input OpenAPI YAML",
    )
    parser.add_argument(
        "--output",
        "-output",
        type=Path,
        help="Path to output .ts file",
    )
    parser.add_argument(
        "--quote",
        "-quote",
        choices=QUOTE_STYLES,
        help='Quote style for string literals: "single" or "double"',
    )
    parser.add_argument(
        "--no-sort",
        "-no-sort",
        action="store_true",
        help="Disable schema name sorting",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/enumgen.yaml"),
        help="Path to configuration file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Extract and summarize without writing output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    input_path = args.input or (Path(args.input_pos) if args.input_pos else None)
    output_path = args.output or (Path(args.output_pos) if args.output_pos else None)

    if input_path is None or (output_path is None and not args.dry_run):
        parser.print_usage(sys.stderr)
        console.print("[red]Both an input and an output path are required[/red]")
        return 2

    # Load configuration
    config = load_config(args.config)
    if args.quote:
        config["output"]["quote"] = args.quote
    if args.no_sort:
        config["output"]["sort"] = False

    quote_style = config["output"]["quote"]
    if quote_style not in QUOTE_STYLES:
        console.print(f'[red]quote must be "single" or "double", got {quote_style!r}[/red]')
        return 2

    console.print("[bold blue]OpenAPI TypeScript Enum Generation[/bold blue]")
    console.print(f"  Input:  {input_path}")
    if output_path:
        console.print(f"  Output: {output_path}")

    try:
        schemas, stats = extract_schemas(input_path, config)
    except FileNotFoundError:
        console.print(f"[red]Input file not found: {input_path}[/red]")
        return 1
    except (OSError, DocumentError) as e:
        console.print(f"[red]Failed to load {input_path}: {e}[/red]")
        return 1

    print_summary(stats)

    if args.dry_run:
        console.print("\n[yellow]DRY RUN - no output written[/yellow]")
        return 0

    text = render_typescript(schemas, input_path.name, quote_style)
    write_output(text, output_path)

    console.print(
        f"\n[bold green]Wrote {len(schemas)} enums to {output_path}[/bold green]",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
