from uuid import UUID

from pydantic import BaseModel

from blog_backend.schemas.common import RequiredStr


class Credentials(BaseModel):
    """Validated login credentials."""

    username: RequiredStr
    password: RequiredStr


class TokenResponse(BaseModel):
    """Token schema for signed access tokens."""

    token: str


class Identity(BaseModel):
    """Caller identity carried inside the access token."""

    id: UUID
    role: str
