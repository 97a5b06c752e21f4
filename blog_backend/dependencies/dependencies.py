"""Application dependencies: store access and the token gate."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.security import APIKeyHeader
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from blog_backend.configs import settings
from blog_backend.db import Database
from blog_backend.errors.auth import InvalidTokenError, MissingTokenError
from blog_backend.managers.token_manager import decode_access_token
from blog_backend.repositories import BlogPostRepository, CommentRepository, UserRepository
from blog_backend.schemas.auth import Identity
from blog_backend.services import AuthService

auth_header = APIKeyHeader(
    name=settings.AUTH_HEADER,
    auto_error=False,
    description="Access token returned by /api/auth/login",
)


def get_database(request: Request) -> Database:
    """Return the ``Database`` created at startup."""
    return request.app.state.database


async def get_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting one database session per request.

    Yields:
        AsyncSession: Database session, closed after the response
    """
    async with database.session_maker() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_post_repository(session: SessionDep) -> BlogPostRepository:
    return BlogPostRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


def get_auth_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> AuthService:
    return AuthService(user_repo)


PostRepoDep = Annotated[BlogPostRepository, Depends(get_post_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_current_identity(
    token: Annotated[str | None, Depends(auth_header)],
) -> Identity:
    """
    Resolve the caller from the auth header.

    This is a pure gate: the token alone decides, the store is not consulted.

    Parameters
    ----------
    token : str | None
        Raw header value.

    Returns
    -------
    Identity
        The caller's id and role.

    Raises
    ------
    MissingTokenError
        If the header is absent or empty.
    InvalidTokenError
        If the token is forged, malformed or expired.
    """
    if not token:
        raise MissingTokenError

    identity = decode_access_token(token)
    if identity is None:
        raise InvalidTokenError

    return identity


IdentityDep = Annotated[Identity, Depends(get_current_identity)]


class PostFilters(BaseModel):
    """Optional filters of the post listing; empty values are dropped."""

    title: str | None = None
    author: str | None = None
    status: str | None = None


def get_post_filters(
    title: Annotated[str | None, Query(description="Case-insensitive title substring")] = None,
    author: Annotated[str | None, Query(description="Exact author ID")] = None,
    status: Annotated[str | None, Query(description="Exact status")] = None,
) -> PostFilters:
    """Collect the listing filters as raw strings; the route parses the author id."""
    return PostFilters(title=title or None, author=author or None, status=status or None)


PostFiltersDep = Annotated[PostFilters, Depends(get_post_filters)]
