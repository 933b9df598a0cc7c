"""Utility modules for OpenAPI enum extraction and rendering."""

from .assembler import ExtractionStats, SchemaAssembler, extract_enums
from .document import DocumentError, find_schemas, load_document, parse_document
from .identifier import RESERVED_IDENTIFIERS, KeyAllocator, to_member_key
from .labels import member_label
from .models import EnumMember, EnumSchema
from .ordering import order_schemas
from .ts_renderer import render_typescript

__all__ = [
    "RESERVED_IDENTIFIERS",
    "DocumentError",
    "EnumMember",
    "EnumSchema",
    "ExtractionStats",
    "KeyAllocator",
    "SchemaAssembler",
    "extract_enums",
    "find_schemas",
    "load_document",
    "member_label",
    "order_schemas",
    "parse_document",
    "render_typescript",
    "to_member_key",
]
