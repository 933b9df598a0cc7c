"""Decide which schema definitions are string enumerations."""

import yaml

from .document import is_mapping, is_scalar, is_sequence, mapping_get, scalar_value

STRING_TYPE = "string"


def string_enum_entries(definition: yaml.Node | None) -> list[yaml.Node] | None:
    """Return the raw ``enum`` entries of a string enum definition.

    A definition qualifies when it is a mapping, its ``type`` is the scalar
    ``string`` and it carries a non-empty ``enum`` sequence. Integer, number,
    boolean and untyped enums are not emitted.

    Args:
        definition: Node found under components/schemas.

    Returns:
        The sequence items (of any node kind), or None if the definition
        does not qualify.
    """
    if not is_mapping(definition):
        return None

    if scalar_value(mapping_get(definition, "type")) != STRING_TYPE:
        return None

    enum_node = mapping_get(definition, "enum")
    if not is_sequence(enum_node) or not enum_node.value:
        return None

    return list(enum_node.value)


def scalar_entries(entries: list[yaml.Node]) -> list[yaml.ScalarNode]:
    """Keep only scalar entries; nested mappings and sequences are dropped."""
    return [entry for entry in entries if is_scalar(entry)]
