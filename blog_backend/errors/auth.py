"""Authentication errors."""

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED

from blog_backend.errors.base import BaseAppError, create_exception_handler
from blog_backend.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class MissingTokenError(UserAuthenticationError):
    """Raised when a protected route is called without a token."""

    def __init__(self) -> None:
        super().__init__("No token, authorization denied", HTTP_401_UNAUTHORIZED)


class InvalidTokenError(UserAuthenticationError):
    """Raised when the token is malformed, forged or expired."""

    def __init__(self) -> None:
        super().__init__("Token is not valid", HTTP_401_UNAUTHORIZED)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised on unknown username or wrong password, without saying which."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials", HTTP_400_BAD_REQUEST)


auth_exception_handler = create_exception_handler(logger)
