"""Core processing logic for propgate.

``process`` walks an input mapping against a schema in declaration order and
either builds the sanitized output or stops at the first failure.

Failures unwind as an internal exception whose path is relative to the value
being checked. Each enclosing level prepends its own segment (a property
name or an array index) on the way out, so the path that reaches
``process`` always starts at the root schema.
"""

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from propgate.schema._types import ErrorPath, PathSegment
from propgate.schema.models import (
    ArrayValidator,
    BooleanValidator,
    CustomValidator,
    IntRangeValidator,
    IntValidator,
    NullValidator,
    ObjectAnyValidator,
    ObjectValidator,
    OptionalWithDefault,
    OrValidator,
    PropertySpec,
    Required,
    StringLiteralSetValidator,
    StringLiteralValidator,
    StringPatternValidator,
    StringRangeValidator,
    StringValidator,
    Validator,
)
from propgate.telemetry import traced_operation

from .errors import CustomValidatorContractError
from .results import Err, ErrorKind, Ok, ProcessResult, Reject

logger = logging.getLogger(__name__)


class _Rejection(Exception):
    """Carries a failure up through the recursion."""

    def __init__(self, path: ErrorPath, kind: str):
        super().__init__(path, kind)
        self.path = path
        self.kind = kind

    def prepend(self, segment: PathSegment) -> None:
        self.path = (segment, *self.path)


def process(params: Mapping[str, Any], schema: Sequence[PropertySpec]) -> ProcessResult:
    """Validate ``params`` against ``schema`` and build the sanitized output.

    Args:
        params: Decoded input; a mapping with string keys
        schema: Ordered property declarations

    Returns:
        ``Ok(output)`` where ``output`` only holds declared properties, or
        ``Err(path, kind)`` describing the first failing property

    Raises:
        TypeError: If ``params`` is not a mapping
        CustomValidatorContractError: If a custom validator breaks its contract

    Example:
        >>> from propgate.schema import IntValidator, prop, required
        >>> process({"a": 1}, [prop("a", required(), IntValidator())])
        Ok(value={'a': 1})
        >>> process({"b": 1}, [prop("a", required(), IntValidator())])
        Err(path=('a',), kind='required')
    """
    if not isinstance(params, Mapping):
        raise TypeError(f"Expected a mapping to process, got {type(params).__name__}")

    with traced_operation(
        "propgate.process", attributes={"propgate.property_count": len(schema)}
    ) as span:
        try:
            output = _process_schema(params, schema)
        except _Rejection as rejection:
            logger.debug(f"Rejected input at {list(rejection.path)}: {rejection.kind}")
            span.set_attribute("propgate.result", "error")
            span.set_attribute("propgate.error.kind", rejection.kind)
            return Err(rejection.path, rejection.kind)

        span.set_attribute("propgate.result", "ok")
        return Ok(output)


def _process_schema(params: Mapping[str, Any], schema: Sequence[PropertySpec]) -> dict[str, Any]:
    output: dict[str, Any] = {}

    for spec in schema:
        if spec.name in params:
            try:
                output[spec.name] = _check_value(params[spec.name], spec.validator)
            except _Rejection as rejection:
                rejection.prepend(spec.name)
                raise
        elif isinstance(spec.requirement, Required):
            raise _Rejection((spec.name,), ErrorKind.REQUIRED.value)
        elif isinstance(spec.requirement, OptionalWithDefault):
            output[spec.name] = copy.deepcopy(spec.requirement.default)

    return output


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_value(value: Any, validator: Validator) -> Any:
    """Return the sanitized form of ``value`` or raise ``_Rejection``.

    The rejection path is relative to ``value``; an empty path means
    ``value`` itself failed.
    """
    if isinstance(validator, BooleanValidator):
        if isinstance(value, bool):
            return value

    elif isinstance(validator, NullValidator):
        if value is None:
            return value

    elif isinstance(validator, IntValidator):
        if _is_int(value):
            return value

    elif isinstance(validator, IntRangeValidator):
        if _is_int(value) and validator.minimum <= value <= validator.maximum:
            return value

    elif isinstance(validator, StringValidator):
        if isinstance(value, str):
            return value

    elif isinstance(validator, StringRangeValidator):
        if isinstance(value, str) and validator.min_length <= len(value) <= validator.max_length:
            return value

    elif isinstance(validator, StringPatternValidator):
        if isinstance(value, str) and validator.pattern.search(value) is not None:
            return value

    elif isinstance(validator, StringLiteralValidator):
        if isinstance(value, str) and value == validator.value:
            return value

    elif isinstance(validator, StringLiteralSetValidator):
        if isinstance(value, str) and value in validator.literals:
            return value

    elif isinstance(validator, ObjectValidator):
        # A non-mapping fails here without descending into the sub-schema
        if isinstance(value, Mapping):
            return _process_schema(value, validator.properties)

    elif isinstance(validator, ObjectAnyValidator):
        if isinstance(value, Mapping):
            return value

    elif isinstance(validator, ArrayValidator):
        if isinstance(value, (list, tuple)):
            return _check_array(value, validator.items)

    elif isinstance(validator, OrValidator):
        if any(_accepts(value, alternative) for alternative in validator.alternatives):
            return value

    elif isinstance(validator, CustomValidator):
        return _apply_custom(value, validator)

    else:
        raise TypeError(f"Unknown validator: {validator!r}")

    raise _Rejection((), ErrorKind.INVALID.value)


def _check_array(values: Sequence[Any], items: Validator) -> list[Any]:
    sanitized: list[Any] = [None] * len(values)

    for index, element in enumerate(values):
        try:
            sanitized[index] = _check_value(element, items)
        except _Rejection as rejection:
            rejection.prepend(index)
            raise

    return sanitized


def _accepts(value: Any, validator: Validator) -> bool:
    """Whether ``validator`` accepts ``value``; the failure details are dropped."""
    try:
        _check_value(value, validator)
    except _Rejection:
        return False
    return True


def _apply_custom(value: Any, validator: CustomValidator) -> Any:
    # Exceptions raised by the function itself propagate untouched
    outcome = validator.fn(value)

    if outcome is None:
        return value
    if isinstance(outcome, Ok):
        return outcome.value
    if isinstance(outcome, Reject):
        raise _Rejection(outcome.relative_path, outcome.reason)

    raise CustomValidatorContractError(validator.fn, outcome)
