from typing import Any

import click

from propgate.cli.utils import abort_with_error, configure_logging, echo_document, echo_table, get_env_flag
from propgate.schema import (
    ArrayValidator,
    CustomValidator,
    IntRangeValidator,
    ObjectValidator,
    OptionalWithDefault,
    OrValidator,
    PropertySpec,
    Schema,
    StringLiteralSetValidator,
    StringLiteralValidator,
    StringPatternValidator,
    StringRangeValidator,
    Validator,
    load_schema_from_file,
)


def describe_validator(validator: Validator) -> str:
    """One-line rendering of a validator, e.g. ``int_range(1..100)``."""
    if isinstance(validator, IntRangeValidator):
        return f"int_range({validator.minimum}..{validator.maximum})"
    if isinstance(validator, StringRangeValidator):
        return f"string_range({validator.min_length}..{validator.max_length})"
    if isinstance(validator, StringPatternValidator):
        return f"string_pattern({validator.pattern.pattern})"
    if isinstance(validator, StringLiteralValidator):
        return f"string_literal({validator.value!r})"
    if isinstance(validator, StringLiteralSetValidator):
        return f"string_literal_set({', '.join(repr(v) for v in validator.literals)})"
    if isinstance(validator, ArrayValidator):
        return f"array<{describe_validator(validator.items)}>"
    if isinstance(validator, OrValidator):
        return f"or({' | '.join(describe_validator(v) for v in validator.alternatives)})"
    if isinstance(validator, CustomValidator):
        return f"custom({getattr(validator.fn, '__qualname__', repr(validator.fn))})"
    return validator.kind


def describe_requirement(spec: PropertySpec) -> str:
    if isinstance(spec.requirement, OptionalWithDefault):
        return f"optional(default={spec.requirement.default!r})"
    return spec.requirement.kind


def _nested_schema(validator: Validator) -> tuple[str, Schema] | None:
    """The sub-schema reached through objects and arrays of objects, with its path suffix."""
    suffix = ""
    while isinstance(validator, ArrayValidator):
        suffix += "[]"
        validator = validator.items
    if isinstance(validator, ObjectValidator):
        return suffix, validator.properties
    return None


def describe_schema(schema: Schema, prefix: str = "") -> list[dict[str, Any]]:
    """Flatten a schema into rows, nested properties first-class with dotted paths."""
    rows = []
    for spec in schema:
        path = f"{prefix}.{spec.name}" if prefix else spec.name
        rows.append(
            {
                "path": path,
                "requirement": describe_requirement(spec),
                "validator": describe_validator(spec.validator),
            }
        )
        nested = _nested_schema(spec.validator)
        if nested is not None:
            suffix, properties = nested
            rows.extend(describe_schema(properties, prefix=path + suffix))
    return rows


@click.command(name="describe")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def describe(schema_file: str, json_output: bool, debug: bool) -> None:
    """List the properties declared by a schema file.

    \b
    Examples:
        propgate describe schema.yml
        propgate describe schema.yml --json-output
    """
    if not json_output:
        json_output = get_env_flag("PROPGATE_JSON_OUTPUT")

    configure_logging(debug)

    try:
        rows = describe_schema(load_schema_from_file(schema_file))
    except Exception as e:
        abort_with_error(e, json_output, debug)

    if json_output:
        echo_document(rows, json_output)
    elif not rows:
        click.echo("Schema declares no properties")
    else:
        echo_table(rows, ("path", "requirement", "validator"))
