"""User entity."""

import uuid
from dataclasses import dataclass


def generate_user_id() -> str:
    """Generate a collision-resistant opaque user ID."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class User:
    """User entity.

    Attributes:
        id: Opaque unique identifier. Immutable once assigned.
        name: Display name.
    """

    id: str
    name: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("User id must not be empty")
        if not self.name:
            raise ValueError("User name must not be empty")

    @classmethod
    def create(cls, name: str, id: str | None = None) -> "User":
        """Create a new user, generating an ID when none is supplied.

        Args:
            name: Display name.
            id: Caller-supplied ID (optional).

        Returns:
            New User entity.
        """
        return cls(id=id or generate_user_id(), name=name)

    def to_dict(self) -> dict[str, str]:
        """Serialize to the public representation."""
        return {"id": self.id, "name": self.name}
