"""Tests for request validation and response shapes."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from blog_backend.models import BlogPostDB, CommentDB
from blog_backend.schemas import (
    AuthorPostCount,
    CommentCreate,
    CommentDetailResponse,
    PostCreate,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
    TopCommentedPost,
    UserCreate,
)


def _post() -> BlogPostDB:
    now = datetime.now(UTC)
    return BlogPostDB(
        id=uuid4(),
        title="t",
        content="c",
        author=uuid4(),
        status="draft",
        created_at=now,
        updated_at=now,
    )


class TestRequestSchemas:
    """Test cases for the validated request data."""

    def test_user_create_requires_every_field(self) -> None:
        """Test that username, email and password are required and non-empty."""
        with pytest.raises(ValidationError):
            UserCreate.model_validate({"username": "a", "email": "a@example.com"})
        with pytest.raises(ValidationError):
            UserCreate(username="", email="a@example.com", password="x")

    def test_post_create_defaults_status(self) -> None:
        """Test that status defaults to draft on create."""
        assert PostCreate(title="t", content="c").status == "draft"

    def test_post_create_rejects_unknown_status(self) -> None:
        """Test that only draft and published are accepted."""
        with pytest.raises(ValidationError):
            PostCreate(title="t", content="c", status="archived")

    def test_post_update_clears_status(self) -> None:
        """Test that status is null when absent on update."""
        assert PostUpdate.model_validate({"title": "t", "content": "c"}).status is None

    def test_post_update_requires_title(self) -> None:
        """Test that title stays required on update."""
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({"title": None, "content": "c"})

    def test_comment_create_requires_uuid_post(self) -> None:
        """Test that the post reference must be a UUID."""
        with pytest.raises(ValidationError):
            CommentCreate.model_validate({"post": "42", "content": "x"})


class TestResponseSchemas:
    """Test cases for the serialized shapes."""

    def test_post_detail_with_author(self) -> None:
        """Test that the author is joined as {id, username}."""
        post = _post()

        detail = PostDetailResponse.from_row(post, "alice")

        assert detail.model_dump(mode="json")["author"] == {
            "id": str(post.author),
            "username": "alice",
        }

    def test_post_detail_without_author(self) -> None:
        """Test that a vanished author serializes as null."""
        assert PostDetailResponse.from_row(_post(), None).author is None

    def test_top_commented_alias(self) -> None:
        """Test that the count is exposed as commentCount."""
        post = PostResponse.model_validate(_post())

        entry = TopCommentedPost(**post.model_dump(), comment_count=3)

        assert entry.model_dump(by_alias=True)["commentCount"] == 3

    def test_posts_by_author_alias(self) -> None:
        """Test that the count is exposed as postCount."""
        row = AuthorPostCount(author="alice", post_count=2)

        assert row.model_dump(by_alias=True) == {"author": "alice", "postCount": 2}

    def test_comment_detail(self) -> None:
        """Test that comments join the author like posts do."""
        comment = CommentDB(
            id=uuid4(),
            post=uuid4(),
            author=uuid4(),
            content="x",
            created_at=datetime.now(UTC),
            approved=True,
        )

        detail = CommentDetailResponse.from_row(comment, "bob")

        assert detail.author is not None
        assert detail.author.username == "bob"
        assert detail.approved is True
