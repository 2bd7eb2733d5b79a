"""Pydantic models for propgate schemas.

A schema is an ordered tuple of :class:`PropertySpec`. Each property names a
field, a presence policy (:data:`Requirement`) and a :data:`Validator`. The
validator models form a closed union discriminated by their ``kind`` field;
``ObjectValidator``, ``ArrayValidator`` and ``OrValidator`` nest further
validators, so the union is recursive.

These models only describe what is acceptable. They never check themselves
(an ``IntRangeValidator`` with ``minimum > maximum`` is legal and simply
rejects every integer); all behaviour lives in :mod:`propgate.engine`.
"""

from __future__ import annotations

import importlib
import logging
import re
from collections.abc import Callable
from typing import Annotated, Any, Literal, Union

from pydantic import Field, field_validator

from propgate.models import PropgateBaseModel

logger = logging.getLogger(__name__)


# Requirements


class Required(PropgateBaseModel):
    """The field must be present in the input."""

    kind: Literal["required"] = "required"


class OptionalWithDefault(PropgateBaseModel):
    """When absent, ``default`` is stored verbatim and the validator is skipped."""

    kind: Literal["optional_default"] = "optional_default"
    default: Any = None


class OptionalNoDefault(PropgateBaseModel):
    """When absent, the field is left out of the output."""

    kind: Literal["optional"] = "optional"


Requirement = Annotated[
    Union[Required, OptionalWithDefault, OptionalNoDefault],
    Field(discriminator="kind"),
]


# Scalar validators


class BooleanValidator(PropgateBaseModel):
    """Accepts ``True`` or ``False`` only."""

    kind: Literal["boolean"] = "boolean"


class NullValidator(PropgateBaseModel):
    """Accepts ``None`` only. A present ``None`` is not the same as an absent field."""

    kind: Literal["null"] = "null"


class IntValidator(PropgateBaseModel):
    """Accepts integers. Booleans, floats and numeric strings are rejected."""

    kind: Literal["int"] = "int"


class IntRangeValidator(PropgateBaseModel):
    """Accepts integers in ``[minimum, maximum]``, both bounds inclusive."""

    kind: Literal["int_range"] = "int_range"
    minimum: int
    maximum: int


class StringValidator(PropgateBaseModel):
    """Accepts any string."""

    kind: Literal["string"] = "string"


class StringRangeValidator(PropgateBaseModel):
    """Accepts strings whose length in code points is in ``[min_length, max_length]``."""

    kind: Literal["string_range"] = "string_range"
    min_length: int
    max_length: int


class StringPatternValidator(PropgateBaseModel):
    """Accepts strings matched by ``pattern``.

    The pattern is searched, not implicitly anchored: use ``^``/``$`` in the
    pattern itself to pin the match. Plain strings are compiled on construction.
    """

    kind: Literal["string_pattern"] = "string_pattern"
    pattern: re.Pattern[str]


class StringLiteralValidator(PropgateBaseModel):
    """Accepts exactly one string literal."""

    kind: Literal["string_literal"] = "string_literal"
    value: str


class StringLiteralSetValidator(PropgateBaseModel):
    """Accepts any string in ``literals``."""

    kind: Literal["string_literal_set"] = "string_literal_set"
    literals: tuple[str, ...]


# Structural validators


class ObjectValidator(PropgateBaseModel):
    """Accepts a mapping and processes it against a nested schema.

    The sanitized sub-object replaces the input value in the output.
    """

    kind: Literal["object"] = "object"
    properties: tuple[PropertySpec, ...]


class ObjectAnyValidator(PropgateBaseModel):
    """Accepts any mapping and passes it through untouched (keys are not filtered)."""

    kind: Literal["object_any"] = "object_any"


class ArrayValidator(PropgateBaseModel):
    """Accepts a list or tuple whose elements each satisfy ``items``."""

    kind: Literal["array"] = "array"
    items: Validator


class OrValidator(PropgateBaseModel):
    """Accepts a value satisfying any of ``alternatives``.

    The original value is stored on success; transformations made by the
    matching alternative are discarded.
    """

    kind: Literal["or"] = "or"
    alternatives: tuple[Validator, ...]


class CustomValidator(PropgateBaseModel):
    """Delegates to a caller supplied function.

    ``fn(value)`` must return ``None`` (accept), ``Ok(new_value)`` (accept and
    replace) or ``Reject(reason, path=...)`` (fail). See
    :mod:`propgate.engine.results`.

    When built from a schema document, ``fn`` may be given as an import path
    of the form ``"package.module:attribute"``.
    """

    kind: Literal["custom"] = "custom"
    fn: Callable[[Any], Any]

    @field_validator("fn", mode="before")
    @classmethod
    def resolve_import_path(cls, value: Any) -> Any:
        """Resolve ``"package.module:attribute"`` strings to the callable they name."""
        if not isinstance(value, str):
            return value
        module_name, sep, attr_path = value.partition(":")
        if not sep or not module_name or not attr_path:
            raise ValueError(
                f"Custom validator reference must look like 'package.module:attribute', got {value!r}"
            )
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as e:
            raise ValueError(f"Cannot import module '{module_name}': {e}") from e
        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError as e:
                raise ValueError(f"Module '{module_name}' has no attribute '{attr_path}'") from e
        logger.debug(f"Resolved custom validator {value!r} to {target!r}")
        return target


Validator = Annotated[
    Union[
        BooleanValidator,
        NullValidator,
        IntValidator,
        IntRangeValidator,
        StringValidator,
        StringRangeValidator,
        StringPatternValidator,
        StringLiteralValidator,
        StringLiteralSetValidator,
        ObjectValidator,
        ObjectAnyValidator,
        ArrayValidator,
        OrValidator,
        CustomValidator,
    ],
    Field(discriminator="kind"),
]


class PropertySpec(PropgateBaseModel):
    """A declared field: its name, presence policy and validator.

    Example:
        >>> spec = PropertySpec(
        ...     name="limit",
        ...     requirement=OptionalWithDefault(default=10),
        ...     validator=IntRangeValidator(minimum=1, maximum=100),
        ... )
    """

    name: str
    requirement: Requirement
    validator: Validator

    @field_validator("requirement", mode="before")
    @classmethod
    def expand_requirement_shorthand(cls, value: Any) -> Any:
        """Accept ``"required"``/``"optional"`` and ``{"kind": "optional", "default": ...}``."""
        if isinstance(value, str):
            return {"kind": value}
        if isinstance(value, dict) and value.get("kind") == "optional" and "default" in value:
            return {"kind": "optional_default", "default": value["default"]}
        return value


Schema = tuple[PropertySpec, ...]


# Update forward references
ObjectValidator.model_rebuild()
ArrayValidator.model_rebuild()
OrValidator.model_rebuild()
PropertySpec.model_rebuild()
