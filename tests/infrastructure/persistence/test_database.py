"""Tests for DatabaseManager."""

from pathlib import Path
from unittest.mock import patch

from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from userlookup.infrastructure.persistence import DatabaseManager


class TestDatabaseManager:
    """DatabaseManager tests."""

    def test_get_engine_with_valid_path(self, tmp_path: Path) -> None:
        """Test engine creation with valid path."""
        manager = DatabaseManager(str(tmp_path / "test.db"))

        engine = manager.get_engine()

        assert "sqlite" in str(engine.url)

    def test_get_engine_creates_parent_directory(self, tmp_path: Path) -> None:
        """Test that parent directory is created if not exists."""
        db_path = tmp_path / "subdir" / "nested" / "test.db"
        manager = DatabaseManager(str(db_path))

        manager.get_engine()

        assert db_path.parent.exists()

    def test_get_engine_is_cached(self) -> None:
        """Test that the same engine is returned on repeated calls."""
        manager = DatabaseManager(":memory:")

        assert manager.get_engine() is manager.get_engine()

    async def test_create_tables_is_idempotent(self, tmp_path: Path) -> None:
        """Test table creation when tables already exist."""
        manager = DatabaseManager(str(tmp_path / "test.db"))

        await manager.create_tables()
        await manager.create_tables()

        async with manager.get_engine().connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )
        await manager.close()

        assert "users" in tables

    async def test_users_table_has_two_columns(self, db_manager: DatabaseManager) -> None:
        """Test that the users table has only id and name."""
        async with db_manager.get_engine().connect() as conn:
            columns = await conn.run_sync(
                lambda sync_conn: {
                    col["name"] for col in inspect(sync_conn).get_columns("users")
                }
            )

        assert columns == {"id", "name"}

    async def test_get_session(self, db_manager: DatabaseManager) -> None:
        """Test session creation."""
        async with db_manager.get_session() as session:
            assert session is not None

    async def test_is_healthy(self, db_manager: DatabaseManager) -> None:
        """Test that a working database is healthy."""
        assert await db_manager.is_healthy() is True

    async def test_is_healthy_false_on_error(self, db_manager: DatabaseManager) -> None:
        """Test that a failing connection is reported as unhealthy."""
        engine = db_manager.get_engine()
        error = OperationalError("SELECT 1", {}, Exception("unable to open"))

        with patch.object(type(engine), "connect", side_effect=error):
            assert await db_manager.is_healthy() is False

    async def test_close_disposes_engine(self, tmp_path: Path) -> None:
        """Test that close disposes engine and clears references."""
        manager = DatabaseManager(str(tmp_path / "test.db"))
        await manager.create_tables()
        assert manager._engine is not None

        await manager.close()

        assert manager._engine is None
        assert manager._session_factory is None

    async def test_close_without_engine(self) -> None:
        """Test that close does nothing if engine was never created."""
        manager = DatabaseManager(":memory:")

        await manager.close()

        assert manager._engine is None
