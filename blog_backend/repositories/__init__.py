from blog_backend.repositories.blog_post import BlogPostRepository
from blog_backend.repositories.comment import CommentRepository
from blog_backend.repositories.user import UserRepository

__all__ = ["BlogPostRepository", "CommentRepository", "UserRepository"]
