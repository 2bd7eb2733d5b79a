"""Tests for the propgate command line interface."""

import json
import logging

import click
import pytest
from click.testing import CliRunner

from propgate.__main__ import cli
from propgate.cli.describe import describe_schema, describe_validator
from propgate.cli.utils import abort_with_error, configure_logging, echo_rejection, echo_table, get_env_flag
from propgate.engine import Err
from propgate.schema import (
    ArrayValidator,
    CustomValidator,
    IntRangeValidator,
    IntValidator,
    ObjectValidator,
    OrValidator,
    StringLiteralSetValidator,
    prop,
    required,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("propgate")
    level, handlers, propagate = package_logger.level, package_logger.handlers[:], package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def user_schema_file(fixtures_dir):
    return str(fixtures_dir / "schemas" / "user.yml")


class TestCheckCommand:
    """Test `propgate check`."""

    def test_accepted_input(self, runner, fixtures_dir, user_schema_file):
        result = runner.invoke(
            cli, ["check", user_schema_file, str(fixtures_dir / "inputs_user_ok.json")]
        )

        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output["user_id"] == "alice01"
        assert output["role"] == "member"
        assert "password" not in output

    def test_accepted_input_json_output(self, runner, fixtures_dir, user_schema_file):
        result = runner.invoke(
            cli,
            ["check", user_schema_file, str(fixtures_dir / "inputs_user_ok.json"), "--json-output"],
        )

        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output["status"] == "ok"
        assert output["result"]["emails"][0]["notification"] is False

    def test_rejected_input(self, runner, fixtures_dir, user_schema_file):
        result = runner.invoke(
            cli, ["check", user_schema_file, str(fixtures_dir / "inputs_user_bad.yml")]
        )

        assert result.exit_code == 1
        assert "Invalid: emails[1].email_address: invalid" in result.output

    def test_rejected_input_json_output(self, runner, fixtures_dir, user_schema_file, monkeypatch):
        monkeypatch.setenv("PROPGATE_JSON_OUTPUT", "1")

        result = runner.invoke(
            cli, ["check", user_schema_file, str(fixtures_dir / "inputs_user_bad.yml")]
        )

        assert result.exit_code == 1
        assert json.loads(result.output) == {
            "status": "invalid",
            "path": ["emails", 1, "email_address"],
            "kind": "invalid",
        }

    def test_broken_schema(self, runner, fixtures_dir):
        result = runner.invoke(
            cli,
            [
                "check",
                str(fixtures_dir / "schemas" / "broken.yml"),
                str(fixtures_dir / "inputs_user_ok.json"),
            ],
        )

        assert result.exit_code == 1
        assert "Error: Invalid schema definition" in result.output

    def test_input_must_be_an_object(self, runner, tmp_path, user_schema_file):
        document = tmp_path / "list.json"
        document.write_text("[1, 2]")

        result = runner.invoke(cli, ["check", user_schema_file, str(document)])

        assert result.exit_code == 1
        assert "Input document must be an object" in result.output

    def test_missing_file(self, runner, user_schema_file):
        result = runner.invoke(cli, ["check", user_schema_file, "does-not-exist.json"])

        assert result.exit_code == 2


class TestDescribeCommand:
    """Test `propgate describe`."""

    def test_table(self, runner, user_schema_file):
        result = runner.invoke(cli, ["describe", user_schema_file])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["user_id", "required", "string_pattern(^[a-zA-Z0-9]{1,255}$)"]
        assert any(line.startswith("emails[].email_address") for line in lines)

    def test_json_output(self, runner, user_schema_file):
        result = runner.invoke(cli, ["describe", user_schema_file, "--json-output"])

        assert result.exit_code == 0
        rows = json.loads(result.output)["result"]
        assert [row["path"] for row in rows] == [
            "user_id",
            "name",
            "role",
            "emails",
            "emails[].email_address",
            "emails[].is_primary",
            "emails[].notification",
            "metadata",
            "nickname",
        ]
        assert rows[1]["requirement"] == "optional(default='')"
        assert rows[7]["requirement"] == "optional"
        assert rows[8]["validator"] == "or(null | string_range(1..32))"


class TestDescribeHelpers:
    """Test the schema rendering helpers."""

    def test_describe_validator(self):
        def positive(value):
            return None

        assert describe_validator(IntValidator()) == "int"
        assert describe_validator(IntRangeValidator(minimum=1, maximum=5)) == "int_range(1..5)"
        assert describe_validator(StringLiteralSetValidator(literals=["a", "b"])) == "string_literal_set('a', 'b')"
        assert describe_validator(ArrayValidator(items=IntValidator())) == "array<int>"
        assert describe_validator(OrValidator(alternatives=[IntValidator()])) == "or(int)"
        assert describe_validator(CustomValidator(fn=positive)).startswith("custom(")

    def test_nested_arrays_of_objects(self):
        schema = (
            prop(
                "grid",
                required(),
                ArrayValidator(
                    items=ArrayValidator(
                        items=ObjectValidator(properties=[prop("v", required(), IntValidator())])
                    )
                ),
            ),
        )

        assert [row["path"] for row in describe_schema(schema)] == ["grid", "grid[][].v"]


class TestCliGroup:
    """Test the top-level command group."""

    def test_help_without_subcommand(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "check" in result.output
        assert "describe" in result.output


class TestCliUtils:
    """Test the shared rendering helpers."""

    @pytest.mark.parametrize("value,expected", [("1", True), ("YES", True), ("0", False), ("off", False)])
    def test_get_env_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("PROPGATE_TEST_FLAG", value)

        assert get_env_flag("PROPGATE_TEST_FLAG") is expected

    def test_get_env_flag_default(self, monkeypatch):
        monkeypatch.delenv("PROPGATE_TEST_FLAG", raising=False)

        assert get_env_flag("PROPGATE_TEST_FLAG", default=True) is True

    def test_configure_logging_does_not_stack_handlers(self, monkeypatch):
        monkeypatch.delenv("PROPGATE_DEBUG", raising=False)

        configure_logging(debug=True)
        configure_logging(debug=False)

        package_logger = logging.getLogger("propgate")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_echo_table_aligns_columns(self):
        @click.command()
        def show():
            echo_table(
                [
                    {"path": "a", "requirement": "required", "validator": "int"},
                    {"path": "longer", "requirement": "optional", "validator": "string"},
                ],
                ("path", "requirement", "validator"),
            )

        result = CliRunner().invoke(show)

        assert result.output.splitlines() == [
            "a       required  int",
            "longer  optional  string",
        ]

    def test_echo_rejection_json(self):
        @click.command()
        def reject():
            echo_rejection(Err(("items", 0), "required"), json_output=True)

        result = CliRunner().invoke(reject)

        assert result.exit_code == 1
        assert json.loads(result.output) == {"status": "invalid", "path": ["items", 0], "kind": "required"}

    def test_abort_with_error_json(self):
        @click.command()
        def fail():
            abort_with_error(ValueError("bad input"), json_output=True)

        result = CliRunner().invoke(fail)

        assert result.exit_code == 1
        assert json.loads(result.output) == {"status": "error", "error": "bad input"}
