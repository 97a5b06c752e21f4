"""Tests for registration, login and the token gate."""

from collections.abc import Awaitable, Callable
from uuid import uuid4

import bcrypt
from httpx import AsyncClient
from sqlalchemy import select

from blog_backend.configs import settings
from blog_backend.db import Database
from blog_backend.managers.token_manager import create_access_token, decode_access_token
from blog_backend.models import UserDB

PASSWORD = "Secret123"

type Register = Callable[..., Awaitable[None]]


async def _stored_user(database: Database, username: str) -> UserDB:
    async with database.transaction() as session:
        result = await session.execute(select(UserDB).where(UserDB.username == username))
        return result.scalar_one()


class TestRegister:
    """Test cases for POST /api/auth/register."""

    async def test_register_success(self, client: AsyncClient, database: Database) -> None:
        """Test that registration stores a reader with a hashed password."""
        response = await client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": PASSWORD},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "User registered successfully"}

        user = await _stored_user(database, "alice")
        assert user.role == "reader"
        assert user.password != PASSWORD
        assert bcrypt.hashpw(PASSWORD.encode(), user.password.encode()) == user.password.encode()

    async def test_role_in_body_is_ignored(self, client: AsyncClient, database: Database) -> None:
        """Test that a role sent by the client is not applied."""
        response = await client.post(
            "/api/auth/register",
            json={
                "username": "mallory",
                "email": "mallory@example.com",
                "password": PASSWORD,
                "role": "admin",
            },
        )

        assert response.status_code == 201
        user = await _stored_user(database, "mallory")
        assert user.role == "reader"

    async def test_missing_field(self, client: AsyncClient) -> None:
        """Test that a missing field collapses to the registration failure."""
        response = await client.post(
            "/api/auth/register",
            json={"username": "alice", "password": PASSWORD},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "User registration failed"}

    async def test_missing_body(self, client: AsyncClient) -> None:
        """Test that a request without a body collapses to the registration failure."""
        response = await client.post("/api/auth/register")

        assert response.status_code == 500
        assert response.json() == {"error": "User registration failed"}

    async def test_mistyped_field(self, client: AsyncClient) -> None:
        """Test that a username that is not a string collapses to the registration failure."""
        response = await client.post(
            "/api/auth/register",
            json={"username": 42, "email": "alice@example.com", "password": PASSWORD},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "User registration failed"}

    async def test_empty_field(self, client: AsyncClient) -> None:
        """Test that an empty password counts as missing."""
        response = await client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": ""},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "User registration failed"}

    async def test_duplicate_username(self, client: AsyncClient) -> None:
        """Test that a taken username gives the generic failure."""
        body = {"username": "alice", "email": "alice@example.com", "password": PASSWORD}
        await client.post("/api/auth/register", json=body)

        response = await client.post(
            "/api/auth/register",
            json={**body, "email": "other@example.com"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "User registration failed"}

    async def test_duplicate_email(self, client: AsyncClient) -> None:
        """Test that a taken email gives the generic failure."""
        body = {"username": "alice", "email": "alice@example.com", "password": PASSWORD}
        await client.post("/api/auth/register", json=body)

        response = await client.post("/api/auth/register", json={**body, "username": "bob"})

        assert response.status_code == 500
        assert response.json() == {"error": "User registration failed"}


class TestLogin:
    """Test cases for POST /api/auth/login."""

    async def test_login_returns_token_for_user(
        self,
        client: AsyncClient,
        database: Database,
        register: Register,
    ) -> None:
        """Test that the token decodes to the user's id and role."""
        await register("alice")

        response = await client.post(
            "/api/auth/login",
            json={"username": "alice", "password": PASSWORD},
        )

        assert response.status_code == 200
        identity = decode_access_token(response.json()["token"])
        user = await _stored_user(database, "alice")
        assert identity is not None
        assert identity.id == user.id
        assert identity.role == "reader"

    async def test_wrong_password_and_unknown_user_look_alike(
        self,
        client: AsyncClient,
        register: Register,
    ) -> None:
        """Test that both failures give the identical 400 response."""
        await register("alice")

        wrong_password = await client.post(
            "/api/auth/login",
            json={"username": "alice", "password": "nope"},
        )
        unknown_user = await client.post(
            "/api/auth/login",
            json={"username": "nobody", "password": PASSWORD},
        )

        assert wrong_password.status_code == unknown_user.status_code == 400
        assert wrong_password.json() == unknown_user.json() == {"error": "Invalid credentials"}

    async def test_username_match_is_exact(
        self,
        client: AsyncClient,
        register: Register,
    ) -> None:
        """Test that the lookup is case sensitive."""
        await register("alice")

        response = await client.post(
            "/api/auth/login",
            json={"username": "ALICE", "password": PASSWORD},
        )

        assert response.status_code == 400

    async def test_missing_field(self, client: AsyncClient) -> None:
        """Test that a missing password collapses to the login failure."""
        response = await client.post("/api/auth/login", json={"username": "alice"})

        assert response.status_code == 500
        assert response.json() == {"error": "Login failed"}

    async def test_unparsable_body(self, client: AsyncClient) -> None:
        """Test that a body that is not JSON collapses to the login failure."""
        response = await client.post(
            "/api/auth/login",
            content=b"username=alice",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Login failed"}


class TestTokenGate:
    """Test cases for the auth header on protected routes."""

    async def test_missing_token(self, client: AsyncClient) -> None:
        """Test that a protected route without a token is rejected."""
        response = await client.post("/api/blogposts", json={"title": "t", "content": "c"})

        assert response.status_code == 401
        assert response.json() == {"error": "No token, authorization denied"}

    async def test_invalid_token(self, client: AsyncClient) -> None:
        """Test that a garbage token is rejected."""
        response = await client.post(
            "/api/blogposts",
            json={"title": "t", "content": "c"},
            headers={settings.AUTH_HEADER: "garbage"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Token is not valid"}

    async def test_token_is_trusted_without_store_lookup(self, client: AsyncClient) -> None:
        """Test that a valid token for a user absent from the store still passes the gate."""
        token = create_access_token(uuid4(), "author")

        response = await client.post(
            "/api/blogposts",
            json={"title": "t", "content": "c"},
            headers={settings.AUTH_HEADER: token},
        )

        assert response.status_code == 201
