from datetime import UTC, datetime
from enum import StrEnum

from sqlmodel import Field, SQLModel


class Role(StrEnum):
    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"


class User(SQLModel, table=True):
    __tablename__ = "Users"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    email: str = Field(unique=True, index=True)
    password_hash: str
    role: str = Field(default=Role.USER.value)  # "user" | "manager" | "admin"
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
