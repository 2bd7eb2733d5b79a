"""propgate schema model - immutable declarations of acceptable input.

## Key Components

### Requirements
- `Required`, `OptionalWithDefault`, `OptionalNoDefault`
- `required()` / `optional(default)` shorthands

### Validators
Scalar: `BooleanValidator`, `NullValidator`, `IntValidator`,
`IntRangeValidator`, `StringValidator`, `StringRangeValidator`,
`StringPatternValidator`, `StringLiteralValidator`,
`StringLiteralSetValidator`.

Structural: `ObjectValidator`, `ObjectAnyValidator`, `ArrayValidator`,
`OrValidator`, `CustomValidator`.

## Quick Example

```python
from propgate.schema import (
    ArrayValidator, BooleanValidator, ObjectValidator, StringPatternValidator,
    optional, prop, required,
)

schema = [
    prop("user_id", required(), StringPatternValidator(pattern=r"^[a-z0-9]+$")),
    prop(
        "emails",
        optional([]),
        ArrayValidator(
            items=ObjectValidator(
                properties=[
                    prop("address", required(), StringPatternValidator(pattern=r"@")),
                    prop("primary", optional(False), BooleanValidator()),
                ]
            )
        ),
    ),
]
```

Schemas may also be loaded from YAML/JSON documents, see
`propgate.schema.loaders`.
"""

from ._types import ErrorPath, PathSegment, RequirementKind, ValidatorKind
from .loaders import (
    SchemaDefinitionError,
    build_schema,
    load_document,
    load_document_from_file,
    load_schema,
    load_schema_from_file,
)
from .models import (
    ArrayValidator,
    BooleanValidator,
    CustomValidator,
    IntRangeValidator,
    IntValidator,
    NullValidator,
    ObjectAnyValidator,
    ObjectValidator,
    OptionalNoDefault,
    OptionalWithDefault,
    OrValidator,
    PropertySpec,
    Required,
    Requirement,
    Schema,
    StringLiteralSetValidator,
    StringLiteralValidator,
    StringPatternValidator,
    StringRangeValidator,
    StringValidator,
    Validator,
)
from .props import optional, prop, required

__all__ = [
    # Types
    "ErrorPath",
    "PathSegment",
    "RequirementKind",
    "ValidatorKind",
    "PropertySpec",
    "Requirement",
    "Schema",
    "Validator",
    # Requirements
    "Required",
    "OptionalWithDefault",
    "OptionalNoDefault",
    # Validators
    "BooleanValidator",
    "NullValidator",
    "IntValidator",
    "IntRangeValidator",
    "StringValidator",
    "StringRangeValidator",
    "StringPatternValidator",
    "StringLiteralValidator",
    "StringLiteralSetValidator",
    "ObjectValidator",
    "ObjectAnyValidator",
    "ArrayValidator",
    "OrValidator",
    "CustomValidator",
    # Constructors
    "prop",
    "required",
    "optional",
    # Loaders
    "SchemaDefinitionError",
    "build_schema",
    "load_document",
    "load_document_from_file",
    "load_schema",
    "load_schema_from_file",
]
