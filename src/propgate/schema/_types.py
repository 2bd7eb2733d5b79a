"""Type aliases shared by schemas and results.

Error paths are tuples of property names and array indices, read from the
root schema down, e.g. ``("emails", 1, "email_address")``. The kind literals
list the ``kind`` tags accepted in schema documents.
"""

from typing import Literal, Union

from .models import (
    PropertySpec,
    Requirement,
    Schema,
    Validator,
)

# A path segment is a property name or an array index
PathSegment = Union[str, int]
ErrorPath = tuple[PathSegment, ...]

ValidatorKind = Literal[
    "boolean",
    "null",
    "int",
    "int_range",
    "string",
    "string_range",
    "string_pattern",
    "string_literal",
    "string_literal_set",
    "object",
    "object_any",
    "array",
    "or",
    "custom",
]
RequirementKind = Literal["required", "optional", "optional_default"]

__all__ = [
    "PropertySpec",
    "Requirement",
    "Schema",
    "Validator",
    "PathSegment",
    "ErrorPath",
    "ValidatorKind",
    "RequirementKind",
]
