"""Unit tests for document loading and node access."""

from pathlib import Path

import pytest
import yaml

from enumgen.utils.document import (
    DocumentError,
    find_schemas,
    is_mapping,
    is_scalar,
    is_sequence,
    iter_definitions,
    load_document,
    mapping_get,
    parse_document,
    scalar_value,
)

SPEC = """\
openapi: 3.0.3
components:
  schemas:
    Status:
      type: string
      enum: [active, inactive]
    Pet:
      type: object
"""


class TestParseDocument:
    """Test composing documents into node graphs."""

    def test_returns_mapping_root(self) -> None:
        root = parse_document(SPEC)
        assert is_mapping(root)

    def test_empty_document_is_none(self) -> None:
        assert parse_document("") is None

    def test_json_is_accepted(self) -> None:
        root = parse_document('{"components": {"schemas": {}}}')
        assert is_mapping(find_schemas(root))

    def test_malformed_yaml_raises(self) -> None:
        with pytest.raises(DocumentError) as exc_info:
            parse_document("components: [unclosed", "broken.yaml")
        assert exc_info.value.source == "broken.yaml"
        assert "broken.yaml" in str(exc_info.value)

    def test_error_chains_yaml_error(self) -> None:
        with pytest.raises(DocumentError) as exc_info:
            parse_document("a: b: c")
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)


class TestLoadDocument:
    """Test reading documents from disk."""

    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "openapi.yaml"
        path.write_text(SPEC, encoding="utf-8")
        root = load_document(path)
        assert is_mapping(find_schemas(root))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.yaml")

    def test_non_utf8_file_raises_document_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"components:\n  schemas: {}\ninfo: \xff\xfe\n")
        with pytest.raises(DocumentError) as exc_info:
            load_document(path)
        assert exc_info.value.source == str(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestAccessors:
    """Test total accessors over loosely-typed nodes."""

    @pytest.fixture
    def root(self) -> yaml.Node:
        return parse_document(SPEC)

    def test_mapping_get_finds_key(self, root: yaml.Node) -> None:
        assert scalar_value(mapping_get(root, "openapi")) == "3.0.3"

    def test_mapping_get_missing_key(self, root: yaml.Node) -> None:
        assert mapping_get(root, "paths") is None

    def test_mapping_get_on_non_mapping(self, root: yaml.Node) -> None:
        scalar = mapping_get(root, "openapi")
        assert mapping_get(scalar, "anything") is None
        assert mapping_get(None, "anything") is None

    def test_mapping_get_first_duplicate_wins(self) -> None:
        root = parse_document("type: string\ntype: integer\n")
        assert scalar_value(mapping_get(root, "type")) == "string"

    def test_scalar_value_of_non_scalar(self, root: yaml.Node) -> None:
        assert scalar_value(mapping_get(root, "components")) == ""
        assert scalar_value(None) == ""

    def test_node_kinds(self, root: yaml.Node) -> None:
        status = mapping_get(find_schemas(root), "Status")
        enum_node = mapping_get(status, "enum")
        assert is_sequence(enum_node)
        assert all(is_scalar(item) for item in enum_node.value)
        assert not is_sequence(status)


class TestFindSchemas:
    """Test locating components.schemas."""

    def test_finds_schemas(self) -> None:
        schemas = find_schemas(parse_document(SPEC))
        assert [name for name, _ in iter_definitions(schemas)] == ["Status", "Pet"]

    def test_missing_components(self) -> None:
        assert find_schemas(parse_document("openapi: 3.0.3\n")) is None

    def test_missing_schemas(self) -> None:
        assert find_schemas(parse_document("components:\n  responses: {}\n")) is None

    def test_components_not_a_mapping(self) -> None:
        assert find_schemas(parse_document("components: [a, b]\n")) is None

    def test_schemas_not_a_mapping(self) -> None:
        assert find_schemas(parse_document("components:\n  schemas: [a]\n")) is None

    def test_root_not_a_mapping(self) -> None:
        assert find_schemas(parse_document("- a\n- b\n")) is None

    def test_none_root(self) -> None:
        assert find_schemas(None) is None


class TestIterDefinitions:
    """Test iteration over named definitions."""

    def test_skips_empty_names(self) -> None:
        schemas = find_schemas(parse_document('components:\n  schemas:\n    "": {}\n    Ok: {}\n'))
        assert [name for name, _ in iter_definitions(schemas)] == ["Ok"]

    def test_skips_non_scalar_names(self) -> None:
        schemas = find_schemas(parse_document("components:\n  schemas:\n    ? [a]\n    : {}\n    Ok: {}\n"))
        assert [name for name, _ in iter_definitions(schemas)] == ["Ok"]

    def test_non_mapping_yields_nothing(self) -> None:
        assert list(iter_definitions(None)) == []
