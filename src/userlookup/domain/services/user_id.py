"""User ID validation shared by the REST and GraphQL surfaces."""

from typing import Any

from userlookup.domain.exceptions import InvalidUserIdError


def validate_user_id(value: Any) -> str:
    """Check that a raw user ID is a non-blank string.

    The value is returned as given; surrounding whitespace is only
    considered for the emptiness check.

    Args:
        value: Raw ID taken from a path parameter or query argument.

    Returns:
        The validated ID.

    Raises:
        InvalidUserIdError: The ID is missing, not a string, or blank.
    """
    if not value or not isinstance(value, str) or not value.strip():
        raise InvalidUserIdError()
    return value
