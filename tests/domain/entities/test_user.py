"""Tests for User entity."""

import dataclasses

import pytest

from userlookup.domain.entities import User, generate_user_id


class TestUser:
    """User entity tests."""

    def test_create_with_given_id(self) -> None:
        """Test that a caller-supplied ID is kept."""
        user = User.create("John Doe", id="user1")

        assert user.id == "user1"
        assert user.name == "John Doe"

    def test_create_generates_id(self) -> None:
        """Test that an ID is generated when none is supplied."""
        user = User.create("John Doe")

        assert user.id
        assert user.name == "John Doe"

    def test_generated_ids_are_unique(self) -> None:
        """Test that generated IDs do not collide."""
        ids = {generate_user_id() for _ in range(1000)}

        assert len(ids) == 1000

    def test_is_immutable(self) -> None:
        """Test that the entity cannot be modified."""
        user = User(id="user1", name="John Doe")

        with pytest.raises(dataclasses.FrozenInstanceError):
            user.id = "user2"  # type: ignore[misc]

    def test_empty_id_rejected(self) -> None:
        """Test that an empty ID is rejected."""
        with pytest.raises(ValueError):
            User(id="", name="John Doe")

    def test_empty_name_rejected(self) -> None:
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError):
            User(id="user1", name="")

    def test_to_dict(self) -> None:
        """Test the public representation."""
        user = User(id="user1", name="John Doe")

        assert user.to_dict() == {"id": "user1", "name": "John Doe"}
