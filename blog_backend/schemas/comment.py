from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from blog_backend.models import CommentDB
from blog_backend.schemas.common import RequiredStr
from blog_backend.schemas.user import AuthorSummary


class CommentCreate(BaseModel):
    """Validated data for a new comment; the post is not checked for existence."""

    post: UUID
    content: RequiredStr


class CommentResponse(BaseModel):
    """Comment with the author as a plain id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    post: UUID
    author: UUID
    content: str
    created_at: datetime
    approved: bool


class CommentDetailResponse(BaseModel):
    """Comment with the author's username joined in."""

    id: UUID
    post: UUID
    author: AuthorSummary | None
    content: str
    created_at: datetime
    approved: bool

    @classmethod
    def from_row(cls, comment: CommentDB, username: str | None) -> Self:
        """Build from a comment and the username of its author, if the author still exists."""
        author = (
            AuthorSummary(id=comment.author, username=username) if username is not None else None
        )
        return cls(
            id=comment.id,
            post=comment.post,
            author=author,
            content=comment.content,
            created_at=comment.created_at,
            approved=comment.approved,
        )
