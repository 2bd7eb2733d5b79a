"""Rendering and environment helpers shared by the propgate commands.

Every command prints one of three things: a sanitized document, the first
rejection of an input, or a failure to load a schema or input file. With
``--json-output`` each of them becomes a single JSON object carrying a
``status`` of ``ok``, ``invalid`` or ``error``.
"""

import json
import logging
import os
import traceback
from collections.abc import Sequence
from typing import Any, NoReturn

import click

from propgate.engine import Err

_TRUTHY = ("1", "true", "yes")


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Read a ``PROPGATE_*`` switch; "1", "true" and "yes" turn it on."""
    value = os.environ.get(env_var, "").lower()
    if not value:
        return default
    return value in _TRUTHY


def configure_logging(debug: bool = False) -> None:
    """Send propgate's log records to stderr.

    Only the ``propgate`` logger is configured, so the engine's debug
    messages about rejected properties show up without turning on debug
    output for every library in the process. ``PROPGATE_DEBUG`` enables
    debug level when ``--debug`` is not given.
    """
    debug = debug or get_env_flag("PROPGATE_DEBUG")
    level = logging.DEBUG if debug else logging.WARNING

    package_logger = logging.getLogger("propgate")
    package_logger.setLevel(level)
    # Repeated invocations in one process (tests, CliRunner) must not stack handlers
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def echo_document(document: Any, json_output: bool = False) -> None:
    """Print an accepted, sanitized document."""
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": document}, indent=2, default=str))
    else:
        click.echo(json.dumps(document, indent=2, ensure_ascii=False, default=str))


def echo_rejection(err: Err, json_output: bool = False) -> NoReturn:
    """Print the first failure of an input and exit with status 1.

    The human form goes to stderr as ``Invalid: emails[1].email_address:
    invalid``; the JSON form keeps the raw path segments so indices stay
    integers.
    """
    if json_output:
        click.echo(json.dumps({"status": "invalid", "path": list(err.path), "kind": err.kind}, indent=2))
    else:
        click.echo(f"Invalid: {err.message}", err=True)
    raise click.exceptions.Exit(1)


def echo_table(rows: Sequence[dict[str, str]], columns: Sequence[str]) -> None:
    """Print ``rows`` as left-aligned columns; the last column is not padded."""
    widths = [max(len(row[column]) for row in rows) for column in columns[:-1]]
    for row in rows:
        cells = [f"{row[column]:<{width}}" for column, width in zip(columns, widths)]
        cells.append(row[columns[-1]])
        click.echo("  ".join(cells))


def abort_with_error(error: Exception, json_output: bool = False, debug: bool = False) -> NoReturn:
    """Report a schema or input loading failure and abort with status 1."""
    if json_output:
        payload: dict[str, Any] = {"status": "error", "error": str(error)}
        if debug:
            payload["type"] = error.__class__.__name__
            payload["traceback"] = traceback.format_exc()
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(f"Error: {error}", err=True)
        if debug:
            click.echo(traceback.format_exc(), err=True)

    raise click.Abort()
