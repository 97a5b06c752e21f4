"""User database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    The password column only ever holds a bcrypt hash. Users are never
    deleted by the API, but nothing references them with a constraint, so
    rows removed out of band leave dangling author ids behind.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    password: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Salted password hash",
    )
    role: str = Field(
        default="reader",
        sa_column=Column(String(20), nullable=False, server_default="reader"),
        description="User role (admin, author, reader)",
    )

    def __repr__(self) -> str:
        return f"<UserDB(id={self.id}, username={self.username}, role={self.role})>"
