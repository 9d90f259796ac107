"""Persistence infrastructure."""

from userlookup.infrastructure.persistence.database import DatabaseManager
from userlookup.infrastructure.persistence.exceptions import (
    DatabaseError,
    PersistenceError,
)
from userlookup.infrastructure.persistence.models import UserModel
from userlookup.infrastructure.persistence.seed import SAMPLE_USERS, seed_users
from userlookup.infrastructure.persistence.user_repository import SQLiteUserRepository

__all__ = [
    "DatabaseError",
    "DatabaseManager",
    "PersistenceError",
    "SAMPLE_USERS",
    "SQLiteUserRepository",
    "UserModel",
    "seed_users",
]
