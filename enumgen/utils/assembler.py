"""Assemble string enum schemas from an OpenAPI document.

Walks ``components.schemas`` in declaration order, keeps the definitions
that are string enumerations and builds one ``EnumSchema`` per definition
with normalized keys and labels for its members.
"""

import logging
from dataclasses import dataclass
from typing import Any

import yaml

from .document import find_schemas, is_scalar, iter_definitions, mapping_get, scalar_value
from .enum_filter import scalar_entries, string_enum_entries
from .identifier import RESERVED_IDENTIFIERS, KeyAllocator, to_member_key
from .labels import member_label
from .models import EnumMember, EnumSchema

logger = logging.getLogger(__name__)

BOOL_TAG = "tag:yaml.org,2002:bool"


@dataclass
class ExtractionStats:
    """Statistics for one extraction pass."""

    definitions_seen: int = 0
    enums_extracted: int = 0
    definitions_skipped: int = 0
    members_extracted: int = 0
    non_scalar_entries_dropped: int = 0
    key_collisions: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "definitions_seen": self.definitions_seen,
            "enums_extracted": self.enums_extracted,
            "definitions_skipped": self.definitions_skipped,
            "members_extracted": self.members_extracted,
            "non_scalar_entries_dropped": self.non_scalar_entries_dropped,
            "key_collisions": self.key_collisions,
        }


def is_true(node: yaml.Node | None) -> bool:
    """Check for the literal scalar ``true`` (quoted "true" and ``True`` do not count)."""
    return is_scalar(node) and node.tag == BOOL_TAG and node.value == "true"


class SchemaAssembler:
    """Builds the ordered list of ``EnumSchema`` for a document.

    Malformed or irrelevant definitions are skipped, never reported as
    errors. Input nodes are only read.
    """

    def __init__(self, reserved: frozenset[str] = RESERVED_IDENTIFIERS) -> None:
        """Initialize assembler.

        Args:
            reserved: Keys that receive a trailing underscore.
        """
        self.reserved = reserved
        self.stats = ExtractionStats()

    def assemble(self, root: yaml.Node | None) -> list[EnumSchema]:
        """Extract every string enum, in declaration order.

        Args:
            root: Root node of a composed document (None for empty documents).

        Returns:
            Enum schemas in the order their definitions appear.
        """
        schemas = find_schemas(root)
        if schemas is None:
            logger.info("Document has no components.schemas mapping")
            return []

        result = []
        for name, definition in iter_definitions(schemas):
            self.stats.definitions_seen += 1
            schema = self.assemble_schema(name, definition)
            if schema is None:
                self.stats.definitions_skipped += 1
                continue
            result.append(schema)

        self.stats.enums_extracted += len(result)
        logger.info(
            "Extracted %d string enums from %d schema definitions",
            len(result),
            self.stats.definitions_seen,
        )
        return result

    def assemble_schema(self, name: str, definition: yaml.Node) -> EnumSchema | None:
        """Build one schema, or None when the definition does not qualify."""
        entries = string_enum_entries(definition)
        if entries is None:
            logger.debug("Skipping %s: not a string enum", name)
            return None

        scalars = scalar_entries(entries)
        self.stats.non_scalar_entries_dropped += len(entries) - len(scalars)

        members = self._build_members(scalars)
        if not members:
            logger.debug("Skipping %s: enum has no scalar values", name)
            return None

        return EnumSchema(
            name=name,
            members=members,
            description=scalar_value(mapping_get(definition, "description")),
            deprecated=is_true(mapping_get(definition, "deprecated")),
            since=scalar_value(mapping_get(definition, "x-since")),
        )

    def _build_members(self, scalars: list[yaml.ScalarNode]) -> tuple[EnumMember, ...]:
        """Normalize keys and pick labels, preserving declaration order."""
        allocator = KeyAllocator()
        members = []

        for node in scalars:
            base_key = to_member_key(node.value, self.reserved)
            key = allocator.allocate(base_key)
            if key != base_key:
                logger.debug("Key collision for %r: using %s", node.value, key)
            members.append(EnumMember(value=node.value, key=key, label=member_label(node)))

        self.stats.members_extracted += len(members)
        self.stats.key_collisions += allocator.collisions
        return tuple(members)


def extract_enums(
    root: yaml.Node | None,
    reserved: frozenset[str] = RESERVED_IDENTIFIERS,
) -> list[EnumSchema]:
    """Convenience wrapper returning the schemas of one document."""
    return SchemaAssembler(reserved).assemble(root)
