"""Shared fixtures."""

from collections.abc import AsyncGenerator

import pytest
from aiohttp import test_utils, web

from userlookup.application.services import UserLookupService
from userlookup.config import DEFAULT_ALLOWED_HOSTS
from userlookup.domain.entities import User
from userlookup.infrastructure.persistence import DatabaseManager, SQLiteUserRepository
from userlookup.presentation import AdmissionPolicy, create_app


@pytest.fixture
async def db_manager() -> AsyncGenerator[DatabaseManager, None]:
    """In-memory database with tables created."""
    manager = DatabaseManager(":memory:")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
def user_repository(db_manager: DatabaseManager) -> SQLiteUserRepository:
    """Repository backed by the in-memory database."""
    return SQLiteUserRepository(db_manager.get_session)


@pytest.fixture
async def seeded_repository(
    user_repository: SQLiteUserRepository,
) -> SQLiteUserRepository:
    """Repository containing user1 -> John Doe and user2 -> Jane Smith."""
    await user_repository.save(User(id="user1", name="John Doe"))
    await user_repository.save(User(id="user2", name="Jane Smith"))
    return user_repository


@pytest.fixture
def user_service(seeded_repository: SQLiteUserRepository) -> UserLookupService:
    """Lookup service over the seeded repository."""
    return UserLookupService(seeded_repository)


@pytest.fixture
def admission_policy() -> AdmissionPolicy:
    """Policy with the default allow-list."""
    return AdmissionPolicy(DEFAULT_ALLOWED_HOSTS)


@pytest.fixture
def app(
    user_service: UserLookupService,
    admission_policy: AdmissionPolicy,
    db_manager: DatabaseManager,
) -> web.Application:
    """Application wired to the seeded database."""
    return create_app(
        user_service=user_service,
        admission_policy=admission_policy,
        db_manager=db_manager,
    )


@pytest.fixture
async def client(app: web.Application) -> AsyncGenerator[test_utils.TestClient, None]:
    """Test client for the application."""
    async with test_utils.TestClient(test_utils.TestServer(app)) as test_client:
        yield test_client
