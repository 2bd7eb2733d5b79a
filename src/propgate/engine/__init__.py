"""propgate processing engine.

## Key Components

- `process(params, schema)`: returns `Ok(output)` or `Err(path, kind)`
- `Sanitizer`: a schema bound facade with a raising `sanitize` method
- `Reject`: what custom validators return to fail
- `SanitizationError`: raised by the raising APIs
- `CustomValidatorContractError`: raised when a custom validator is broken

## Quick Example

```python
from propgate.engine import Err, process
from propgate.schema import IntValidator, ObjectValidator, prop, required

schema = [prop("a", required(), ObjectValidator(properties=[prop("b", required(), IntValidator())]))]

process({"a": {"b": 1, "c": 2}, "d": 3}, schema)
# Ok(value={'a': {'b': 1}})

process({"a": {"b": "x"}}, schema)
# Err(path=('a', 'b'), kind='invalid')
```
"""

from .core import process
from .errors import CustomValidatorContractError, SanitizationError
from .results import Err, ErrorKind, Ok, ProcessResult, Reject, format_path
from .sanitizer import Sanitizer

__all__ = [
    # Processing
    "process",
    "Sanitizer",
    # Results
    "Ok",
    "Err",
    "Reject",
    "ErrorKind",
    "ProcessResult",
    "format_path",
    # Errors
    "SanitizationError",
    "CustomValidatorContractError",
]
