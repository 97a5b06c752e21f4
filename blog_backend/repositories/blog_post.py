"""Blog post repository for database operations."""

from uuid import UUID

from sqlalchemy import Select, desc, func, select
from sqlmodel import col

from blog_backend.configs import TOP_COMMENTED_LIMIT
from blog_backend.models import BlogPostDB, CommentDB, UserDB
from blog_backend.repositories.base import BaseRepository
from blog_backend.schemas.blog_post import PostCreate, PostUpdate
from blog_backend.utils.helpers import utc_now

type PostWithAuthor = tuple[BlogPostDB, str | None]


class BlogPostRepository(BaseRepository[BlogPostDB]):
    """
    Repository for BlogPost database operations.

    Reads that "join in" the author return ``(post, username)`` pairs where
    the username is None if the author row no longer exists.
    """

    model = BlogPostDB

    def _with_author(self) -> Select:
        return (
            select(BlogPostDB, UserDB.username)
            .select_from(BlogPostDB)
            .outerjoin(UserDB, col(UserDB.id) == col(BlogPostDB.author))
        )

    async def create(self, author: UUID, post: PostCreate) -> BlogPostDB:
        """
        Create a new post owned by ``author``.

        Args:
            author: ID of the calling user
            post: Validated post data

        Returns:
            BlogPostDB: Created post
        """
        db_post = BlogPostDB(
            title=post.title,
            content=post.content,
            status=post.status,
            author=author,
        )
        return await self._save(db_post)

    async def get_with_author(self, post_id: UUID) -> PostWithAuthor | None:
        """
        Get a post with its author's username.

        Args:
            post_id: Post UUID

        Returns:
            PostWithAuthor | None: ``(post, username)`` if found, None otherwise
        """
        statement = self._with_author().where(col(BlogPostDB.id) == post_id)
        result = await self.session.execute(statement)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def search(
        self,
        title: str | None = None,
        author: UUID | None = None,
        status: str | None = None,
    ) -> list[PostWithAuthor]:
        """
        List posts matching all given filters, with their author's username.

        Args:
            title: Case-insensitive substring of the title
            author: Exact author ID
            status: Exact status

        Returns:
            list[PostWithAuthor]: Matching posts, unpaginated
        """
        statement = self._with_author()
        if title:
            statement = statement.where(col(BlogPostDB.title).icontains(title, autoescape=True))
        if author:
            statement = statement.where(col(BlogPostDB.author) == author)
        if status:
            statement = statement.where(col(BlogPostDB.status) == status)

        statement = statement.order_by(col(BlogPostDB.created_at))
        result = await self.session.execute(statement)
        return [(post, username) for post, username in result.all()]

    async def update(self, post: BlogPostDB, data: PostUpdate) -> BlogPostDB:
        """
        Overwrite title, content and status and refresh ``updated_at``.

        Args:
            post: Post to update
            data: Replacement values; a missing status clears it

        Returns:
            BlogPostDB: Updated post
        """
        post.title = data.title
        post.content = data.content
        post.status = data.status
        post.updated_at = utc_now()
        return await self._save(post)

    async def top_commented(self, limit: int = TOP_COMMENTED_LIMIT) -> list[tuple[BlogPostDB, int]]:
        """
        Rank posts by number of comments, approved or not.

        Posts without comments take part with a count of zero.

        Args:
            limit: Maximum number of posts returned

        Returns:
            list[tuple[BlogPostDB, int]]: ``(post, comment_count)`` by descending count
        """
        comment_count = func.count(col(CommentDB.id)).label("comment_count")
        statement = (
            select(BlogPostDB, comment_count)
            .outerjoin(CommentDB, col(CommentDB.post) == col(BlogPostDB.id))
            .group_by(col(BlogPostDB.id))
            .order_by(desc(comment_count))
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return [(post, count) for post, count in result.all()]

    async def posts_by_author(self) -> list[tuple[str, int]]:
        """
        Count posts per author.

        Posts whose author no longer exists are left out.

        Returns:
            list[tuple[str, int]]: ``(username, post_count)`` in no particular order
        """
        statement = (
            select(UserDB.username, func.count(col(BlogPostDB.id)))
            .select_from(BlogPostDB)
            .join(UserDB, col(UserDB.id) == col(BlogPostDB.author))
            .group_by(col(BlogPostDB.author), col(UserDB.username))
        )
        result = await self.session.execute(statement)
        return [(username, count) for username, count in result.all()]
