"""Per-route failure boundary."""

from collections.abc import Generator
from contextlib import contextmanager

from blog_backend.errors.auth import UserAuthenticationError
from blog_backend.errors.request import ForbiddenError, NotFoundError, RequestFailedError
from blog_backend.monitoring import get_logger

logger = get_logger(__name__)

# Errors the client is meant to see as they are
CLIENT_ERRORS = (UserAuthenticationError, NotFoundError, ForbiddenError)


@contextmanager
def failure_boundary(message: str) -> Generator[None]:
    """
    Collapse unexpected failures of a route body into one static message.

    Client errors (400/401/403/404) pass through untouched. Anything else,
    database errors and malformed ids or bodies included, is logged with its
    traceback and re-raised as ``RequestFailedError(message)`` so the client
    only ever sees the route's message.

    Args:
        message: The message returned to the client on failure.

    Raises:
        RequestFailedError: If the wrapped block raised an unexpected error.

    Example:
        >>> with failure_boundary("Failed to fetch post"):
        ...     post = await repo.get_by_id(UUID(post_id))
    """
    try:
        yield
    except CLIENT_ERRORS:
        raise
    except Exception as e:
        logger.exception(message)
        raise RequestFailedError(message) from e
