from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog_backend.models import BlogPostDB
from blog_backend.schemas.common import PostStatus, RequiredStr
from blog_backend.schemas.user import AuthorSummary


class PostCreate(BaseModel):
    """Validated data for a new post; status defaults to draft."""

    title: RequiredStr
    content: RequiredStr
    status: PostStatus | None = "draft"


class PostUpdate(BaseModel):
    """
    Validated data for a full overwrite of a post.

    Title and content stay required, status may be cleared to null.
    """

    title: RequiredStr
    content: RequiredStr
    status: PostStatus | None = None


class PostResponse(BaseModel):
    """Post with the author as a plain id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    author: UUID
    status: PostStatus | None
    created_at: datetime
    updated_at: datetime


class PostDetailResponse(BaseModel):
    """Post with the author's username joined in."""

    id: UUID
    title: str
    content: str
    author: AuthorSummary | None
    status: PostStatus | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, post: BlogPostDB, username: str | None) -> Self:
        """Build from a post and the username of its author, if the author still exists."""
        author = AuthorSummary(id=post.author, username=username) if username is not None else None
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=author,
            status=post.status,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class TopCommentedPost(PostResponse):
    """Post annotated with the number of comments it received."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    comment_count: int = Field(alias="commentCount")


class AuthorPostCount(BaseModel):
    """Number of posts written by one author."""

    model_config = ConfigDict(populate_by_name=True)

    author: str = Field(description="Author username")
    post_count: int = Field(alias="postCount")
