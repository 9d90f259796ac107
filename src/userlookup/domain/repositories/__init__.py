"""Domain repositories."""

from userlookup.domain.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
