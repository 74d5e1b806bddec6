"""Unit tests for the presence checks shared by the services."""

import pytest

from app.application.services.validation import (
    is_missing,
    optional_text,
    parse_flag,
    require_fields,
)
from app.domain.exceptions import ValidationException


@pytest.mark.parametrize("value", [None, "", "   ", "\t"])
def test_missing_values(value: object) -> None:
    assert is_missing(value) is True


@pytest.mark.parametrize("value", ["x", 0, False, [], 1.5])
def test_present_values(value: object) -> None:
    """Only None and blank strings count as missing."""
    assert is_missing(value) is False


def test_require_fields_reports_first_missing_field() -> None:
    with pytest.raises(ValidationException) as exc_info:
        require_fields({"a": "1", "b": " ", "c": None}, ["a", "b", "c"], "A, B and C.")
    assert exc_info.value.message == "A, B and C."
    assert exc_info.value.details == {"field": "b"}


def test_require_fields_passes() -> None:
    require_fields({"a": "1"}, ["a"], "A.")


def test_parse_flag() -> None:
    assert parse_flag(True) is True
    assert parse_flag("true") is True
    assert parse_flag("True") is False
    assert parse_flag(1) is False
    assert parse_flag(None) is False


def test_optional_text() -> None:
    assert optional_text("  ") is None
    assert optional_text("Delhi") == "Delhi"
