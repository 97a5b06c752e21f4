"""Blog post database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_backend.utils.helpers import utc_now


class BlogPostDB(SQLModel, table=True):
    """
    Blog post database model.

    ``author`` holds the id of the user who created the post. It is indexed
    but deliberately not a foreign key: deleting users or posts never
    cascades.
    """

    __tablename__ = cast("declared_attr[str]", "blog_posts")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )
    title: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Post title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post content",
    )
    author: UUID = Field(
        nullable=False,
        index=True,
        description="Author ID",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )
    status: str | None = Field(
        default="draft",
        sa_column=Column(String(20), nullable=True, index=True),
        description="Post status (draft, published)",
    )

    def __repr__(self) -> str:
        return f"<BlogPostDB(id={self.id}, title={self.title}, status={self.status})>"
