"""Tests for the aggregate report routes."""

from collections.abc import Awaitable, Callable

from httpx import AsyncClient
from sqlalchemy import delete

from blog_backend.db import Database
from blog_backend.models import UserDB

type Headers = Callable[..., Awaitable[dict[str, str]]]


async def _post(client: AsyncClient, headers: dict[str, str], title: str) -> str:
    response = await client.post(
        "/api/blogposts",
        json={"title": title, "content": "c"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def _comments(client: AsyncClient, headers: dict[str, str], post_id: str, n: int) -> None:
    for i in range(n):
        response = await client.post(
            "/api/comments",
            json={"post": post_id, "content": f"comment {i}"},
            headers=headers,
        )
        assert response.status_code == 201


class TestTopCommented:
    """Test cases for GET /api/blogposts/top-commented."""

    async def test_top_five_by_descending_count(
        self,
        client: AsyncClient,
        user_headers: Headers,
    ) -> None:
        """Test ranking, the limit of five and counting of unapproved comments."""
        alice = await user_headers("alice")
        counts = {"p0": 0, "p1": 1, "p2": 2, "p3": 3, "p4": 4, "p5": 5, "p6": 6}
        for title, n in counts.items():
            post_id = await _post(client, alice, title)
            await _comments(client, alice, post_id, n)

        response = await client.get("/api/blogposts/top-commented")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 5
        assert [p["title"] for p in body] == ["p6", "p5", "p4", "p3", "p2"]
        assert [p["commentCount"] for p in body] == [6, 5, 4, 3, 2]

    async def test_posts_without_comments_included(
        self,
        client: AsyncClient,
        user_headers: Headers,
    ) -> None:
        """Test that posts with zero comments still appear."""
        alice = await user_headers("alice")
        post_id = await _post(client, alice, "lonely")

        response = await client.get("/api/blogposts/top-commented")

        assert response.json()[0]["id"] == post_id
        assert response.json()[0]["commentCount"] == 0

    async def test_full_post_is_returned(
        self,
        client: AsyncClient,
        user_headers: Headers,
    ) -> None:
        """Test that entries are complete posts."""
        alice = await user_headers("alice")
        await _post(client, alice, "full")

        entry = (await client.get("/api/blogposts/top-commented")).json()[0]

        assert {"id", "title", "content", "author", "status", "created_at", "updated_at"} <= set(
            entry,
        )

    async def test_empty(self, client: AsyncClient) -> None:
        """Test that an empty store gives an empty report."""
        response = await client.get("/api/blogposts/top-commented")

        assert response.status_code == 200
        assert response.json() == []


class TestPostsByAuthor:
    """Test cases for GET /api/blogposts/posts-by-author."""

    async def test_counts_per_author(self, client: AsyncClient, user_headers: Headers) -> None:
        """Test that posts are counted per author username."""
        alice = await user_headers("alice")
        bob = await user_headers("bob")
        await user_headers("carol")
        for i in range(3):
            await _post(client, alice, f"a{i}")
        await _post(client, bob, "b0")

        response = await client.get("/api/blogposts/posts-by-author")

        assert response.status_code == 200
        counts = {row["author"]: row["postCount"] for row in response.json()}
        assert counts == {"alice": 3, "bob": 1}

    async def test_missing_author_dropped(
        self,
        client: AsyncClient,
        database: Database,
        user_headers: Headers,
    ) -> None:
        """Test that posts of a deleted user are left out."""
        alice = await user_headers("alice")
        bob = await user_headers("bob")
        await _post(client, alice, "a0")
        await _post(client, bob, "b0")
        async with database.transaction() as session:
            await session.execute(delete(UserDB).where(UserDB.username == "bob"))

        response = await client.get("/api/blogposts/posts-by-author")

        assert response.json() == [{"author": "alice", "postCount": 1}]
