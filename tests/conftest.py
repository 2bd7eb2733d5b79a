"""
Global pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

from propgate.schema import (
    ArrayValidator,
    BooleanValidator,
    ObjectValidator,
    StringPatternValidator,
    StringRangeValidator,
    optional,
    prop,
    required,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def user_schema():
    """A user with a list of email objects, mixing every requirement kind."""
    return [
        prop("user_id", required(), StringPatternValidator(pattern=r"^[a-zA-Z0-9]{1,255}$")),
        prop("name", optional(""), StringRangeValidator(min_length=0, max_length=255)),
        prop(
            "emails",
            optional([]),
            ArrayValidator(
                items=ObjectValidator(
                    properties=[
                        prop("email_address", required(), StringPatternValidator(pattern=EMAIL_PATTERN)),
                        prop("is_primary", required(), BooleanValidator()),
                        prop("notification", optional(False), BooleanValidator()),
                    ]
                )
            ),
        ),
    ]


@pytest.fixture
def user_input():
    return {
        "user_id": "keshihoriuchi",
        "name": "Takeshi Horiuchi",
        "emails": [
            {
                "email_address": "keshihoriuchi@gmail.com",
                "is_primary": True,
                "notification": True,
            },
            {
                "email_address": "keshihoriuchi2@gmail.com",
                "is_primary": False,
            },
        ],
    }
