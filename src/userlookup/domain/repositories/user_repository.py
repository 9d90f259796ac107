"""User repository protocol."""

from typing import Protocol

from userlookup.domain.entities import User


class UserRepository(Protocol):
    """ユーザー情報リポジトリの抽象インターフェース

    ユーザー情報の保存・取得を抽象化し、
    永続化層の実装詳細を隠蔽する。
    """

    async def save(self, user: User) -> None:
        """ユーザー情報を保存する

        既存のユーザー（同一の ID）が存在する場合は名前を更新する。

        Args:
            user: 保存するユーザー
        """
        ...

    async def find_by_id(self, user_id: str) -> User | None:
        """ID でユーザーを検索する

        Args:
            user_id: ユーザー ID

        Returns:
            ユーザー（存在しない場合は None）
        """
        ...

    async def find_all(self) -> list[User]:
        """全ユーザーを取得する

        Returns:
            ユーザーのリスト（登録順）
        """
        ...

    async def delete_all(self) -> int:
        """全ユーザーを削除する

        Returns:
            削除した件数
        """
        ...
