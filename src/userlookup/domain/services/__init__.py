"""Domain services."""

from userlookup.domain.services.user_id import validate_user_id

__all__ = ["validate_user_id"]
