"""SQLModel table definitions."""

from sqlmodel import Field, SQLModel


class UserModel(SQLModel, table=True):
    """ユーザーテーブル"""

    __tablename__ = "users"

    id: str = Field(primary_key=True)
    name: str
