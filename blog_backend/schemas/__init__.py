from blog_backend.schemas.auth import Credentials, Identity, TokenResponse
from blog_backend.schemas.blog_post import (
    AuthorPostCount,
    PostCreate,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
    TopCommentedPost,
)
from blog_backend.schemas.comment import (
    CommentCreate,
    CommentDetailResponse,
    CommentResponse,
)
from blog_backend.schemas.common import MessageResponse
from blog_backend.schemas.user import AuthorSummary, UserCreate

__all__ = [
    "AuthorPostCount",
    "AuthorSummary",
    "CommentCreate",
    "CommentDetailResponse",
    "CommentResponse",
    "Credentials",
    "Identity",
    "MessageResponse",
    "PostCreate",
    "PostDetailResponse",
    "PostResponse",
    "PostUpdate",
    "TokenResponse",
    "TopCommentedPost",
    "UserCreate",
]
