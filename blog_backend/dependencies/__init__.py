from blog_backend.dependencies.dependencies import (
    AuthServiceDep,
    CommentRepoDep,
    IdentityDep,
    PostFiltersDep,
    PostRepoDep,
    SessionDep,
    get_current_identity,
    get_database,
    get_session,
)

__all__ = [
    "AuthServiceDep",
    "CommentRepoDep",
    "IdentityDep",
    "PostFiltersDep",
    "PostRepoDep",
    "SessionDep",
    "get_current_identity",
    "get_database",
    "get_session",
]
