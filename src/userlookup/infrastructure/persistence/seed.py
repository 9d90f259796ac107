"""Sample data seeding."""

import logging

from userlookup.domain.entities import User
from userlookup.domain.repositories import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS: tuple[User, ...] = (
    User(id="user1", name="John Doe"),
    User(id="user2", name="Jane Smith"),
    User(id="user3", name="Bob Wilson"),
)


async def seed_users(
    repository: UserRepository,
    users: tuple[User, ...] = SAMPLE_USERS,
) -> list[User]:
    """既存ユーザーを削除し、サンプルユーザーを投入する

    Args:
        repository: 投入先のリポジトリ
        users: 投入するユーザー

    Returns:
        投入したユーザーのリスト
    """
    deleted = await repository.delete_all()
    if deleted:
        logger.info("Cleared %d existing users", deleted)

    for user in users:
        await repository.save(user)

    logger.info("Seeded users: %s", ", ".join(user.id for user in users))
    return list(users)
