# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from blog_backend.cli import AccountData, create_account
from blog_backend.configs import settings
from blog_backend.db import Database
from blog_backend.main import app

type Register = Callable[..., Awaitable[None]]
type Login = Callable[[str, str], Awaitable[str]]
type Headers = Callable[..., Awaitable[dict[str, str]]]

PASSWORD = "Secret123"


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite+aiosqlite://")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app, backed by the in-memory database."""
    app.state.database = database
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register(client: AsyncClient) -> Register:
    """Register a user through the API."""

    async def _register(username: str, password: str = PASSWORD, email: str | None = None) -> None:
        response = await client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text

    return _register


@pytest.fixture
def login(client: AsyncClient) -> Login:
    """Log in through the API and return the token."""

    async def _login(username: str, password: str) -> str:
        response = await client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _login


@pytest.fixture
def user_headers(register: Register, login: Login) -> Headers:
    """Register a reader and return its auth headers."""

    async def _headers(username: str) -> dict[str, str]:
        await register(username)
        token = await login(username, PASSWORD)
        return {settings.AUTH_HEADER: token}

    return _headers


@pytest.fixture
def admin_headers(database: Database, login: Login) -> Headers:
    """Create an admin directly in the store and return its auth headers."""

    async def _headers(username: str = "admin") -> dict[str, str]:
        await create_account(
            database,
            AccountData(
                username=username,
                email=f"{username}@example.com",
                password=PASSWORD,
                role="admin",
            ),
        )
        token = await login(username, PASSWORD)
        return {settings.AUTH_HEADER: token}

    return _headers
