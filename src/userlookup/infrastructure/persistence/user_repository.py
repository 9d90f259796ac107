"""SQLite implementation of UserRepository."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy import delete, literal_column
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from userlookup.domain.entities import User
from userlookup.infrastructure.persistence.exceptions import DatabaseError
from userlookup.infrastructure.persistence.models import UserModel


class SQLiteUserRepository:
    """SQLite 版 UserRepository 実装

    ユーザー情報の読み書きを SQLite データベースに対して行う。
    SQLAlchemy の例外は DatabaseError に変換して送出する。
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ) -> None:
        """初期化

        Args:
            session_factory: 非同期セッション生成関数
        """
        self._session_factory = session_factory

    async def save(self, user: User) -> None:
        """ユーザー情報を保存する（upsert）

        Args:
            user: 保存するユーザー

        Raises:
            DatabaseError: データベース操作に失敗
        """
        try:
            async with self._session_factory() as session:
                existing = await session.get(UserModel, user.id)
                if existing:
                    existing.name = user.name
                    session.add(existing)
                else:
                    session.add(self._to_model(user))
                await session.commit()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to save user {user.id}") from e

    async def find_by_id(self, user_id: str) -> User | None:
        """ID でユーザーを検索する

        Args:
            user_id: ユーザー ID

        Returns:
            ユーザー（存在しない場合は None）

        Raises:
            DatabaseError: データベース操作に失敗
        """
        try:
            async with self._session_factory() as session:
                statement = select(UserModel).where(UserModel.id == user_id)
                result = await session.exec(statement)
                model = result.first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to find user {user_id}") from e

        if model is None:
            return None
        return self._to_entity(model)

    async def find_all(self) -> list[User]:
        """全ユーザーを登録順に取得する

        Returns:
            ユーザーのリスト

        Raises:
            DatabaseError: データベース操作に失敗
        """
        try:
            async with self._session_factory() as session:
                statement = select(UserModel).order_by(literal_column("rowid"))
                result = await session.exec(statement)
                models = result.all()
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to list users") from e

        return [self._to_entity(model) for model in models]

    async def delete_all(self) -> int:
        """全ユーザーを削除する

        Returns:
            削除した件数

        Raises:
            DatabaseError: データベース操作に失敗
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(delete(UserModel))
                await session.commit()
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to delete users") from e

        return result.rowcount or 0  # type: ignore[union-attr]

    def _to_entity(self, model: UserModel) -> User:
        """モデルをエンティティに変換する"""
        return User(id=model.id, name=model.name)

    def _to_model(self, entity: User) -> UserModel:
        """エンティティをモデルに変換する"""
        return UserModel(id=entity.id, name=entity.name)
