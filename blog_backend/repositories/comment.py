"""Comment repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlmodel import col

from blog_backend.models import CommentDB, UserDB
from blog_backend.repositories.base import BaseRepository
from blog_backend.schemas.comment import CommentCreate


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB

    async def create(self, author: UUID, comment: CommentCreate) -> CommentDB:
        """
        Create an unapproved comment.

        Args:
            author: ID of the calling user
            comment: Validated comment data

        Returns:
            CommentDB: Created comment
        """
        db_comment = CommentDB(
            post=comment.post,
            content=comment.content,
            author=author,
            approved=False,
        )
        return await self._save(db_comment)

    async def approve(self, comment: CommentDB) -> CommentDB:
        """
        Mark a comment as approved. Approving twice is harmless.

        Args:
            comment: Comment to approve

        Returns:
            CommentDB: Approved comment
        """
        comment.approved = True
        return await self._save(comment)

    async def list_approved_for_post(self, post_id: UUID) -> list[tuple[CommentDB, str | None]]:
        """
        List the approved comments of a post with their author's username.

        The post itself need not exist.

        Args:
            post_id: Post UUID

        Returns:
            list[tuple[CommentDB, str | None]]: ``(comment, username)`` oldest first
        """
        statement = (
            select(CommentDB, UserDB.username)
            .select_from(CommentDB)
            .outerjoin(UserDB, col(UserDB.id) == col(CommentDB.author))
            .where(col(CommentDB.post) == post_id, col(CommentDB.approved).is_(True))
            .order_by(col(CommentDB.created_at))
        )
        result = await self.session.execute(statement)
        return [(comment, username) for comment, username in result.all()]
