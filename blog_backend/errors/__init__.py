from blog_backend.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserAuthenticationError,
    auth_exception_handler,
)
from blog_backend.errors.base import BaseAppError, create_exception_handler
from blog_backend.errors.boundary import failure_boundary
from blog_backend.errors.database import (
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
)
from blog_backend.errors.password_hasher import PasswordHashingError
from blog_backend.errors.request import (
    ForbiddenError,
    NotFoundError,
    RequestFailedError,
    request_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotFoundError",
    "PasswordHashingError",
    "RequestFailedError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "create_exception_handler",
    "failure_boundary",
    "request_exception_handler",
]
