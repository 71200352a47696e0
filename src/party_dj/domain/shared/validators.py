"""Shared validators for request parameters and settings.

Request parameters follow a deliberately narrow rule: a required value is
rejected only when it is absent or the empty string. Whitespace-only values
pass through untouched.
"""

from __future__ import annotations

from typing import Any

from party_dj.domain.shared.exceptions import InvalidParameterError
from party_dj.domain.shared.messages import ErrorMessages


def is_param_empty(value: Any) -> bool:
    """Check whether a request parameter is missing.

    Args:
        value: The raw parameter value.

    Returns:
        True if the value is None or the empty string, False otherwise.
    """
    return value is None or value == ""


def require_param(value: Any, field: str, label: str) -> str:
    """Validate that a required string parameter is present.

    Args:
        value: The raw parameter value.
        field: Attribute name of the parameter.
        label: Human-readable name used in the error message.

    Returns:
        The validated value.

    Raises:
        InvalidParameterError: If the value is missing, empty or not a string.
    """
    if is_param_empty(value) or not isinstance(value, str):
        raise InvalidParameterError(field=field, label=label)
    return value


def validate_sqlite_url(value: str) -> str:
    """Validate that a database URL points at SQLite.

    Raises:
        ValueError: If the URL uses another scheme.
    """
    if not value.startswith("sqlite://"):
        raise ValueError(ErrorMessages.INVALID_DATABASE_URL)
    return value
