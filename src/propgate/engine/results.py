"""Result models returned by the engine and by custom validators.

``process`` returns :class:`Ok` or :class:`Err`. Custom validator functions
return ``None``, :class:`Ok` or :class:`Reject`.
"""

from enum import Enum
from typing import Any, Union

from pydantic import Field

from propgate.models import PropgateBaseModel
from propgate.schema._types import ErrorPath, PathSegment


class ErrorKind(str, Enum):
    """Reasons reported by the engine itself.

    Custom validators may report any other string.
    """

    REQUIRED = "required"
    INVALID = "invalid"


def format_path(path: tuple[PathSegment, ...]) -> str:
    """Render a path the way it would be written in Python-ish notation.

    Example:
        >>> format_path(("emails", 0, "email_address"))
        'emails[0].email_address'
    """
    rendered = []
    for segment in path:
        if isinstance(segment, int):
            rendered.append(f"[{segment}]")
        elif rendered:
            rendered.append(f".{segment}")
        else:
            rendered.append(segment)
    return "".join(rendered)


class Ok(PropgateBaseModel):
    """A successful result holding the sanitized value.

    Custom validators return ``Ok(new_value)`` to replace the value they
    were given.
    """

    value: Any

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)

    @property
    def is_ok(self) -> bool:
        return True


class Err(PropgateBaseModel):
    """A failed result.

    Attributes:
        path: Names and indices leading from the root schema to the failing value.
            Never empty; the first element is always a property name.
        kind: ``"required"``, ``"invalid"`` or a reason chosen by a custom validator.
    """

    path: ErrorPath = Field(min_length=1)
    kind: str

    def __init__(self, path: ErrorPath, kind: str, **data: Any) -> None:
        super().__init__(path=path, kind=kind, **data)

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def legacy_path(self) -> PathSegment | ErrorPath:
        """The path with single-element paths rendered as a bare segment."""
        if len(self.path) == 1:
            return self.path[0]
        return self.path

    @property
    def message(self) -> str:
        return f"{format_path(self.path)}: {self.kind}"


class Reject(PropgateBaseModel):
    """Failure reported by a custom validator.

    ``path`` locates the failure inside the value the validator was given,
    either as a single segment or a sequence of segments. It is appended to
    the path of the property the validator belongs to.

    Example:
        >>> def check_pair(value):
        ...     if value.get("b") != 1:
        ...         return Reject("invalid", path="b")
        ...     return Ok({"b": 1})
    """

    reason: str = ErrorKind.INVALID.value
    path: Union[PathSegment, ErrorPath, None] = None

    def __init__(
        self,
        reason: str = ErrorKind.INVALID.value,
        path: Union[PathSegment, ErrorPath, list[PathSegment], None] = None,
        **data: Any,
    ) -> None:
        super().__init__(reason=reason, path=path, **data)

    @property
    def relative_path(self) -> ErrorPath:
        if self.path is None:
            return ()
        if isinstance(self.path, tuple):
            return self.path
        return (self.path,)


ProcessResult = Union[Ok, Err]
