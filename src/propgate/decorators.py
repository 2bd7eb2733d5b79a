"""Sanitizing decorator for functions and methods.

``sanitize_params`` runs the arguments of every call through a schema before
the function sees them. The function is then called with the sanitized
values as keyword arguments, so undeclared arguments are dropped, defaults
declared in the schema are filled in, and custom validators may replace
values.

Example:
    >>> from propgate.decorators import sanitize_params
    >>> from propgate.schema import IntRangeValidator, StringValidator, optional, prop, required
    >>>
    >>> @sanitize_params([
    ...     prop("name", required(), StringValidator()),
    ...     prop("limit", optional(10), IntRangeValidator(minimum=1, maximum=100)),
    ... ])
    ... def search(name, limit):
    ...     return name, limit
    >>>
    >>> search("alice")
    ('alice', 10)
"""

import inspect
from collections.abc import Callable, Mapping, Sequence
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar, cast

from propgate.engine.sanitizer import Sanitizer
from propgate.schema.models import PropertySpec

F = TypeVar("F", bound=Callable[..., Any])

# First-parameter names passed through untouched as the method receiver
_RECEIVER_NAMES = ("self", "cls")


class sanitize_params:
    """Sanitize function arguments against a schema.

    Raises ``SanitizationError`` from the decorated function when its
    arguments fail the schema; the function body is not run in that case.
    """

    def __init__(self, schema: Sequence[PropertySpec]):
        self.sanitizer = Sanitizer(schema)

    @classmethod
    def from_file(cls, schema_path: str | Path) -> "sanitize_params":
        """Create the decorator from a YAML/JSON schema file."""
        decorator = cls(())
        decorator.sanitizer = Sanitizer.from_file(schema_path)
        return decorator

    @classmethod
    def from_dict(cls, schema_dict: Mapping[str, Any] | list[Any]) -> "sanitize_params":
        """Create the decorator from a decoded schema document."""
        decorator = cls(())
        decorator.sanitizer = Sanitizer.from_dict(schema_dict)
        return decorator

    def __call__(self, func: F) -> F:
        signature = inspect.signature(func)
        receiver = _receiver_name(signature)

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                receivers, params = self._split_arguments(signature, receiver, args, kwargs)
                return await func(*receivers, **self.sanitizer.sanitize(params))

            return cast(F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            receivers, params = self._split_arguments(signature, receiver, args, kwargs)
            return func(*receivers, **self.sanitizer.sanitize(params))

        return cast(F, sync_wrapper)

    @staticmethod
    def _split_arguments(
        signature: inspect.Signature,
        receiver: str | None,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> tuple[list[Any], dict[str, Any]]:
        """Map positional and keyword arguments to parameter names.

        Binding is partial and function defaults are not applied, so an
        omitted argument is absent from the mapping handed to the schema,
        which then reports it as required or fills in its declared default.

        Returns:
            The receiver argument, if any, and the remaining name to value
            mapping
        """
        bound = signature.bind_partial(*args, **kwargs)
        params = dict(bound.arguments)
        receivers = [params.pop(receiver)] if receiver in params else []
        return receivers, params


def _receiver_name(signature: inspect.Signature) -> str | None:
    """Name of the ``self``/``cls`` parameter when the function is a method.

    The decorator runs before the function is bound to a class, so methods
    are recognised by convention: a first positional parameter named
    ``self`` or ``cls``. Methods using another name for it have that
    argument treated as data.
    """
    parameters = list(signature.parameters.values())
    if not parameters:
        return None
    first = parameters[0]
    if first.name in _RECEIVER_NAMES and first.kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        return first.name
    return None
