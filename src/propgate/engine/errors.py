"""Exceptions raised by the propgate engine."""

from typing import Any

from propgate.schema._types import ErrorPath

from .results import Err, format_path


class SanitizationError(ValueError):
    """Raised by the raising APIs when input fails its schema.

    ``process`` never raises this; it returns an :class:`Err` instead.

    Attributes:
        path: Names and indices leading to the failing value.
        kind: Reason for the failure.

    Example:
        >>> try:
        ...     sanitizer.sanitize(params)
        ... except SanitizationError as e:
        ...     print(f"Rejected {e.path}: {e.kind}")
    """

    def __init__(self, path: ErrorPath, kind: str):
        self.path = tuple(path)
        self.kind = kind
        super().__init__(f"{format_path(self.path)}: {kind}")

    @classmethod
    def from_err(cls, err: Err) -> "SanitizationError":
        return cls(err.path, err.kind)

    def to_err(self) -> Err:
        return Err(self.path, self.kind)


class CustomValidatorContractError(TypeError):
    """Raised when a custom validator function returns something outside its contract.

    This signals a broken validator, not invalid data, so it is never turned
    into an :class:`Err`.
    """

    def __init__(self, fn: Any, returned: Any):
        self.fn = fn
        self.returned = returned
        name = getattr(fn, "__qualname__", repr(fn))
        super().__init__(
            f"Custom validator {name} must return None, Ok(value) or Reject(reason, path=...), "
            f"got {returned!r}"
        )
