"""Authorization policies for posts and comments."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends

from blog_backend.dependencies.dependencies import get_current_identity
from blog_backend.errors.request import ForbiddenError
from blog_backend.models import BlogPostDB
from blog_backend.schemas.auth import Identity


def can_modify(identity: Identity, post: BlogPostDB) -> bool:
    """
    Decide whether the caller may update or delete a post.

    Only the author may; admins get no override.

    Args:
        identity: The caller
        post: The post being modified

    Returns:
        bool: True if the caller owns the post
    """
    return post.author == identity.id


def require_role(*roles: str) -> Callable[..., Identity]:
    """
    Create a dependency that requires one of the given roles.

    The check uses the role carried in the token, before any lookup.

    Args:
        roles: Allowed roles

    Returns:
        Callable: Dependency function

    Example:
        @router.put("/{comment_id}/approve")
        async def approve(identity: Annotated[Identity, Depends(require_role("admin"))]):
            ...
    """

    def role_checker(
        identity: Annotated[Identity, Depends(get_current_identity)],
    ) -> Identity:
        if identity.role not in roles:
            raise ForbiddenError
        return identity

    return role_checker


AdminDep = Annotated[Identity, Depends(require_role("admin"))]
