"""Input presence checks shared by the record services.

Validation is presence-only: a field is missing when it is None or a blank
string. No type coercion happens here beyond the boolean flag parser.
"""

from collections.abc import Mapping
from typing import Any

from app.domain.exceptions import ValidationException


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: Mapping[str, Any], names: list[str], message: str) -> None:
    """Raise ValidationException(message) naming the first missing field."""
    for name in names:
        if is_missing(data.get(name)):
            raise ValidationException(message, field=name)


def parse_flag(value: Any) -> bool:
    """True only for boolean True or the literal string "true"."""
    return value is True or value == "true"


def optional_text(value: Any) -> Any:
    """Blank strings are stored as None."""
    return None if is_missing(value) else value
