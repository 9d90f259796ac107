"""Application services."""

from userlookup.application.services.user_lookup import UserLookupService

__all__ = ["UserLookupService"]
