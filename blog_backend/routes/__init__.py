from blog_backend.routes.auth import router as auth_router
from blog_backend.routes.blog_post import router as blog_post_router
from blog_backend.routes.comment import router as comment_router

__all__ = ["auth_router", "blog_post_router", "comment_router"]
