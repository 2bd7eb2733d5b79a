"""Schema loading utilities for propgate.

Schemas can be declared as YAML or JSON documents instead of Python code::

    properties:
      - name: user_id
        requirement: required
        validator: {kind: string_pattern, pattern: "^[a-zA-Z0-9]{1,255}$"}
      - name: name
        requirement: {kind: optional, default: ""}
        validator: {kind: string_range, min_length: 0, max_length: 255}
      - name: tags
        requirement: optional
        validator:
          kind: array
          items: {kind: string}

Validators are selected by their ``kind`` tag (see
:mod:`propgate.schema.models`). In YAML the null validator must be written
``kind: "null"`` since a bare ``null`` is parsed as a missing value.
"""

import json
import logging
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .models import Schema

logger = logging.getLogger(__name__)

_SCHEMA_ADAPTER: TypeAdapter[Schema] = TypeAdapter(Schema)


class SchemaDefinitionError(ValueError):
    """Raised when a schema document cannot be parsed or built."""

    pass


def load_document(content: str, format: str = "yaml") -> Any:
    """Load a YAML or JSON document from string content.

    Args:
        content: Document content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        The decoded document

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "yaml":
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    elif format == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")


def load_document_from_file(path: str | Path) -> Any:
    """Load a YAML or JSON document, choosing the format from the file extension.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() in [".yaml", ".yml"]:
        format = "yaml"
    elif path.suffix.lower() == ".json":
        format = "json"
    else:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")

    content = path.read_text(encoding="utf-8")
    return load_document(content, format=format)


def build_schema(document: Any) -> Schema:
    """Build a schema from a decoded document.

    Args:
        document: Either a mapping with a ``properties`` list or the list itself

    Returns:
        Tuple of PropertySpec models

    Raises:
        SchemaDefinitionError: If the document does not describe a valid schema
    """
    if isinstance(document, dict):
        if "properties" not in document:
            raise SchemaDefinitionError("Schema document must contain a 'properties' list")
        document = document["properties"]

    if not isinstance(document, list):
        raise SchemaDefinitionError(
            f"Schema properties must be a list, got {type(document).__name__}"
        )

    try:
        schema = _SCHEMA_ADAPTER.validate_python(document)
    except PydanticValidationError as e:
        raise SchemaDefinitionError(f"Invalid schema definition: {e}") from e

    logger.debug(f"Built schema with {len(schema)} properties")
    return cast(Schema, schema)


def load_schema(content: str, format: str = "yaml") -> Schema:
    """Load and build a schema from string content."""
    try:
        document = load_document(content, format=format)
    except ValueError as e:
        raise SchemaDefinitionError(str(e)) from e
    return build_schema(document)


def load_schema_from_file(path: str | Path) -> Schema:
    """Load and build a schema from a YAML or JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        SchemaDefinitionError: If the file cannot be parsed or built
    """
    try:
        document = load_document_from_file(path)
    except ValueError as e:
        raise SchemaDefinitionError(str(e)) from e
    return build_schema(document)
