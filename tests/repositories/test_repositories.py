"""Tests for the repositories against an in-memory database."""

from uuid import uuid4

import pytest

from blog_backend.db import Database
from blog_backend.errors import DatabaseError, DuplicateEntryError
from blog_backend.models import BlogPostDB, UserDB
from blog_backend.repositories import BlogPostRepository, CommentRepository, UserRepository
from blog_backend.schemas.blog_post import PostCreate, PostUpdate
from blog_backend.schemas.comment import CommentCreate


def _user(username: str) -> UserDB:
    return UserDB(username=username, email=f"{username}@example.com", password="hash")


class TestUserRepository:
    """Test cases for UserRepository."""

    async def test_create_and_lookup(self, database: Database) -> None:
        """Test that a created user is found by username and id."""
        async with database.transaction() as session:
            repo = UserRepository(session)
            created = await repo.create(_user("alice"))

            assert created.role == "reader"
            assert (await repo.get_by_username("alice")).id == created.id
            assert (await repo.get_by_id(created.id)).username == "alice"
            assert await repo.get_by_username("bob") is None

    async def test_duplicate_username(self, database: Database) -> None:
        """Test that unique violations become DuplicateEntryError."""
        async with database.transaction() as session:
            repo = UserRepository(session)
            await repo.create(_user("alice"))

            with pytest.raises(DuplicateEntryError):
                await repo.create(UserDB(username="alice", email="x@example.com", password="h"))

    async def test_update_role(self, database: Database) -> None:
        """Test that the role can be changed."""
        async with database.transaction() as session:
            repo = UserRepository(session)
            user = await repo.create(_user("alice"))

            updated = await repo.update_role(user, "author")

            assert updated.role == "author"


class TestBlogPostRepository:
    """Test cases for BlogPostRepository."""

    async def test_create_update_delete(self, database: Database) -> None:
        """Test the life cycle of a post."""
        author = uuid4()
        async with database.transaction() as session:
            repo = BlogPostRepository(session)
            post = await repo.create(author, PostCreate(title="t", content="c"))
            assert post.status == "draft"
            created_at = post.created_at

            updated = await repo.update(post, PostUpdate(title="t2", content="c2"))
            assert updated.title == "t2"
            assert updated.status is None
            assert updated.created_at == created_at
            assert updated.updated_at >= created_at

            await repo.delete(updated)
            assert await repo.get_by_id(post.id) is None

    async def test_search_without_filters_returns_all(self, database: Database) -> None:
        """Test that no filters means every post."""
        async with database.transaction() as session:
            repo = BlogPostRepository(session)
            for title in ("a", "b", "c"):
                await repo.create(uuid4(), PostCreate(title=title, content="c"))

            rows = await repo.search()

            assert sorted(post.title for post, _ in rows) == ["a", "b", "c"]
            assert all(username is None for _, username in rows)

    async def test_get_with_author(self, database: Database) -> None:
        """Test that the author's username is joined in."""
        async with database.transaction() as session:
            user = await UserRepository(session).create(_user("alice"))
            repo = BlogPostRepository(session)
            post = await repo.create(user.id, PostCreate(title="t", content="c"))

            row = await repo.get_with_author(post.id)

            assert row is not None
            assert row[0].id == post.id
            assert row[1] == "alice"
            assert await repo.get_with_author(uuid4()) is None

    async def test_top_commented_counts_every_comment(self, database: Database) -> None:
        """Test that approved and pending comments are both counted."""
        async with database.transaction() as session:
            posts = BlogPostRepository(session)
            comments = CommentRepository(session)
            busy = await posts.create(uuid4(), PostCreate(title="busy", content="c"))
            quiet = await posts.create(uuid4(), PostCreate(title="quiet", content="c"))
            first = await comments.create(uuid4(), CommentCreate(post=busy.id, content="x"))
            await comments.create(uuid4(), CommentCreate(post=busy.id, content="y"))
            await comments.approve(first)

            rows = await posts.top_commented()

            assert [(post.id, count) for post, count in rows] == [(busy.id, 2), (quiet.id, 0)]

    async def test_posts_by_author(self, database: Database) -> None:
        """Test that counts are grouped by author and keyed by username."""
        async with database.transaction() as session:
            alice = await UserRepository(session).create(_user("alice"))
            repo = BlogPostRepository(session)
            await repo.create(alice.id, PostCreate(title="a", content="c"))
            await repo.create(alice.id, PostCreate(title="b", content="c"))
            await repo.create(uuid4(), PostCreate(title="orphan", content="c"))

            assert await repo.posts_by_author() == [("alice", 2)]


class TestCommentRepository:
    """Test cases for CommentRepository."""

    async def test_only_approved_listed(self, database: Database) -> None:
        """Test that pending comments are not listed."""
        post_id = uuid4()
        async with database.transaction() as session:
            repo = CommentRepository(session)
            shown = await repo.create(uuid4(), CommentCreate(post=post_id, content="shown"))
            await repo.create(uuid4(), CommentCreate(post=post_id, content="hidden"))
            await repo.approve(shown)

            rows = await repo.list_approved_for_post(post_id)

            assert [(comment.content, username) for comment, username in rows] == [
                ("shown", None),
            ]

    async def test_comment_outlives_post(self, database: Database) -> None:
        """Test that deleting a post does not touch its comments."""
        async with database.transaction() as session:
            posts = BlogPostRepository(session)
            comments = CommentRepository(session)
            post = await posts.create(uuid4(), PostCreate(title="t", content="c"))
            comment = await comments.create(uuid4(), CommentCreate(post=post.id, content="x"))

            await posts.delete(post)

            assert await posts.get_by_id(post.id) is None
            assert (await comments.get_by_id(comment.id)).post == post.id

    async def test_missing_title_fails_in_store(self, database: Database) -> None:
        """Test that the store itself refuses a post without a title."""
        async with database.transaction() as session:
            repo = BlogPostRepository(session)

            with pytest.raises(DatabaseError):
                await repo._save(BlogPostDB(title=None, content="c", author=uuid4()))
