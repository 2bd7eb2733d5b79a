"""propgate - declarative validation and allow-list sanitization of decoded input.

propgate checks nested key/value data (as decoded from JSON, YAML, query
strings...) against a declared schema and builds a sanitized copy holding
only the declared fields. Processing stops at the first failing field and
reports its exact path.

## Modules

### Schema (`propgate.schema`)
Immutable property, requirement and validator declarations, plus loaders
for YAML/JSON schema documents.

### Engine (`propgate.engine`)
`process(params, schema)` and the `Sanitizer` facade.

### Decorators (`propgate.decorators`)
`sanitize_params` for sanitizing function arguments.

## Quick Start

```python
from propgate import process, prop, required, optional
from propgate.schema import BooleanValidator, IntValidator

schema = [
    prop("id", required(), IntValidator()),
    prop("active", optional(True), BooleanValidator()),
]

process({"id": 7, "extra": "dropped"}, schema)
# Ok(value={'id': 7, 'active': True})

process({"active": False}, schema)
# Err(path=('id',), kind='required')
```
"""

from propgate.engine import (
    CustomValidatorContractError,
    Err,
    ErrorKind,
    Ok,
    ProcessResult,
    Reject,
    SanitizationError,
    Sanitizer,
    process,
)
from propgate.schema import PropertySpec, optional, prop, required
from propgate.version import PACKAGE_VERSION as __version__

__all__ = [
    "__version__",
    "process",
    "Sanitizer",
    "prop",
    "required",
    "optional",
    "PropertySpec",
    "Ok",
    "Err",
    "Reject",
    "ErrorKind",
    "ProcessResult",
    "SanitizationError",
    "CustomValidatorContractError",
]
