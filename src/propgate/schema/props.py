"""Constructors for declaring schemas in Python code."""

from typing import Any

from .models import (
    OptionalNoDefault,
    OptionalWithDefault,
    PropertySpec,
    Required,
    Requirement,
    Validator,
)

_NO_DEFAULT: Any = object()


def prop(name: str, requirement: Requirement, validator: Validator) -> PropertySpec:
    """Declare a property.

    Args:
        name: Key looked up in the input and written to the output
        requirement: Presence policy, see :func:`required` and :func:`optional`
        validator: Rule applied to the value when it is present

    Returns:
        PropertySpec ready to be placed in a schema

    Example:
        >>> from propgate.schema import IntValidator
        >>> prop("a", required(), IntValidator())
        PropertySpec(name='a', requirement=Required(kind='required'), validator=IntValidator(kind='int'))
    """
    return PropertySpec(name=name, requirement=requirement, validator=validator)


def required() -> Required:
    """The property must be present."""
    return Required()


def optional(default: Any = _NO_DEFAULT) -> OptionalWithDefault | OptionalNoDefault:
    """The property may be absent.

    With a ``default`` the absent property is filled in with that value
    (which is not validated); without one it is left out of the output.
    ``optional(None)`` fills in ``None``.
    """
    if default is _NO_DEFAULT:
        return OptionalNoDefault()
    return OptionalWithDefault(default=default)
