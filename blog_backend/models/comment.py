"""Comment database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel

from blog_backend.utils.helpers import utc_now


class CommentDB(SQLModel, table=True):
    """
    Comment database model.

    ``post`` is not checked for existence and survives the deletion of the
    post it points to.
    """

    __tablename__ = cast("declared_attr[str]", "comments")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Comment ID",
    )
    post: UUID = Field(
        nullable=False,
        index=True,
        description="Post ID",
    )
    author: UUID = Field(
        nullable=False,
        description="Author ID",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment content",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    approved: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
        description="Visible on the public listing once approved",
    )
