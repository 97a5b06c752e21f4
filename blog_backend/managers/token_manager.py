"""Token manager for signing and reading access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt
from pydantic import ValidationError

from blog_backend.configs import settings
from blog_backend.schemas.auth import Identity


def create_access_token(
    user_id: UUID,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed access token carrying the caller identity.

    The payload is ``{"user": {"id": ..., "role": ...}}`` plus the standard
    ``iat`` and ``exp`` claims.

    Args:
        user_id: User's UUID
        role: User's role at the time of login
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded access token
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "user": {"id": str(user_id), "role": role},
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> Identity | None:
    """
    Decode and validate an access token.

    Args:
        token: Encoded access token

    Returns:
        Identity | None: The caller identity, or None when the token is
        forged, malformed, expired or lacks ``user.id`` / ``user.role``
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError:
        return None

    user = payload.get("user")
    if not isinstance(user, dict):
        return None

    try:
        return Identity.model_validate(user)
    except ValidationError:
        return None
