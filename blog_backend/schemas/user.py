from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog_backend.schemas.common import RequiredStr


class UserCreate(BaseModel):
    """Validated registration data. Role is never taken from the request."""

    username: RequiredStr = Field(..., description="Unique username")
    email: RequiredStr = Field(..., description="Unique email address")
    password: RequiredStr = Field(..., description="Plaintext password, hashed before storage")


class AuthorSummary(BaseModel):
    """Author joined into post and comment listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
