from typing import Any

import click

from propgate.cli.utils import abort_with_error, configure_logging, echo_document, echo_rejection, get_env_flag
from propgate.engine import Err, Sanitizer
from propgate.schema import load_document_from_file


@click.command(name="check")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def check(schema_file: str, input_file: str, json_output: bool, debug: bool) -> None:
    """Check an input document against a schema.

    Prints the sanitized document when the input is accepted, or the path
    and reason of the first failure. Exits with status 1 on failure.

    \b
    Examples:
        propgate check schema.yml request.json
        propgate check schema.yml request.json --json-output
    """
    if not json_output:
        json_output = get_env_flag("PROPGATE_JSON_OUTPUT")

    configure_logging(debug)

    result: Any = None
    try:
        sanitizer = Sanitizer.from_file(schema_file)
        params = load_document_from_file(input_file)
        if not isinstance(params, dict):
            raise ValueError(
                f"Input document must be an object, got {type(params).__name__}"
            )
        result = sanitizer.process(params)
    except Exception as e:
        abort_with_error(e, json_output, debug)

    if isinstance(result, Err):
        echo_rejection(result, json_output)

    echo_document(result.value, json_output)
