"""Domain entities."""

from userlookup.domain.entities.user import User, generate_user_id

__all__ = ["User", "generate_user_id"]
