"""Errors raised by route handlers."""

from starlette.status import (
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blog_backend.configs import DEFAULT_ERROR_MESSAGE
from blog_backend.errors.base import BaseAppError, create_exception_handler
from blog_backend.monitoring import get_logger

logger = get_logger(__name__)


class NotFoundError(BaseAppError):
    """Raised when the requested record does not exist."""

    def __init__(self, detail: str = "Record not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ForbiddenError(BaseAppError):
    """Raised when the caller may not act on the resource."""

    def __init__(self, detail: str = "Not authorized") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class RequestFailedError(BaseAppError):
    """Catch-all failure carrying the route's static message."""

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


request_exception_handler = create_exception_handler(logger)
