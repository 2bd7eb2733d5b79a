"""Tests for propgate.schema.loaders module."""

import pytest

from propgate.engine import Err, Ok, process
from propgate.schema import (
    NullValidator,
    OptionalWithDefault,
    OrValidator,
    SchemaDefinitionError,
    build_schema,
    load_document,
    load_document_from_file,
    load_schema,
    load_schema_from_file,
)


class TestLoadDocument:
    """Test raw YAML/JSON loading."""

    def test_yaml_and_json(self):
        assert load_document("a: 1") == {"a": 1}
        assert load_document('{"a": 1}', format="json") == {"a": 1}

    def test_parse_errors(self):
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_document("a: [1")
        with pytest.raises(ValueError, match="Failed to parse JSON"):
            load_document("{", format="json")

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            load_document("a = 1", format="toml")

    def test_file_errors(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document_from_file(tmp_path / "missing.yml")

        other = tmp_path / "schema.txt"
        other.write_text("a: 1")
        with pytest.raises(ValueError, match="Unsupported file extension"):
            load_document_from_file(other)


class TestBuildSchema:
    """Test building models from decoded documents."""

    def test_mapping_and_bare_list(self):
        properties = [{"name": "a", "requirement": "required", "validator": {"kind": "int"}}]

        assert build_schema({"properties": properties}) == build_schema(properties)

    def test_missing_properties_key(self):
        with pytest.raises(SchemaDefinitionError, match="'properties'"):
            build_schema({"props": []})

    def test_properties_must_be_a_list(self):
        with pytest.raises(SchemaDefinitionError, match="must be a list"):
            build_schema({"properties": {"a": {}}})

    def test_invalid_definition(self):
        with pytest.raises(SchemaDefinitionError, match="Invalid schema definition"):
            build_schema([{"name": "a", "requirement": "required", "validator": {"kind": "nope"}}])

    def test_load_schema_wraps_parse_errors(self):
        with pytest.raises(SchemaDefinitionError, match="Failed to parse YAML"):
            load_schema("properties: [")


class TestSchemaFiles:
    """Test loading the fixture schema files and processing with them."""

    def test_yaml_schema(self, fixtures_dir):
        schema = load_schema_from_file(fixtures_dir / "schemas" / "user.yml")

        assert [spec.name for spec in schema] == [
            "user_id",
            "name",
            "role",
            "emails",
            "metadata",
            "nickname",
        ]
        assert schema[2].requirement == OptionalWithDefault(default="member")
        assert isinstance(schema[5].validator, OrValidator)
        assert isinstance(schema[5].validator.alternatives[0], NullValidator)

    def test_yaml_schema_processing(self, fixtures_dir):
        schema = load_schema_from_file(fixtures_dir / "schemas" / "user.yml")

        result = process(
            {
                "user_id": "alice01",
                "emails": [{"email_address": "a@example.com", "is_primary": True}],
                "metadata": {"Source": "import", "nested": {"x": 1}},
                "nickname": None,
                "password": "hunter2",
            },
            schema,
        )

        assert result == Ok(
            {
                "user_id": "alice01",
                "name": "",
                "role": "member",
                "emails": [
                    {"email_address": "a@example.com", "is_primary": True, "notification": False}
                ],
                "metadata": {"Source": "import", "nested": {"x": 1}},
                "nickname": None,
            }
        )
        assert process({"user_id": "alice01", "role": "owner"}, schema) == Err(
            ("role",), "invalid"
        )

    def test_json_schema_with_custom_reference(self, fixtures_dir, monkeypatch):
        monkeypatch.syspath_prepend(str(fixtures_dir))
        schema = load_schema_from_file(fixtures_dir / "schemas" / "limits.json")

        assert process({}, schema) == Ok({"limit": 10})
        assert process({"limit": 5, "even": 4}, schema) == Ok({"limit": 5, "even": 4})
        assert process({"limit": 5, "even": 3}, schema) == Err(("even",), "odd")
        assert process({"limit": 500}, schema) == Err(("limit",), "invalid")

    def test_broken_schema_file(self, fixtures_dir):
        with pytest.raises(SchemaDefinitionError):
            load_schema_from_file(fixtures_dir / "schemas" / "broken.yml")
