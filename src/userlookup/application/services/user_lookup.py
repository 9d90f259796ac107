"""User lookup service."""

import logging

from userlookup.domain.entities import User
from userlookup.domain.repositories import UserRepository

logger = logging.getLogger(__name__)


class UserLookupService:
    """Read-only access to users for the API surfaces.

    Both the REST and GraphQL surfaces go through this service; neither
    touches the repository directly. Results are never cached.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize the service.

        Args:
            user_repository: Repository backing the lookups.
        """
        self._user_repository = user_repository

    async def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID.

        Args:
            user_id: User ID to look up.

        Returns:
            The user, or None if no user has this ID.
        """
        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            logger.debug("User not found: %s", user_id)
        return user

    async def find_all(self) -> list[User]:
        """Return all users in insertion order."""
        return await self._user_repository.find_all()
