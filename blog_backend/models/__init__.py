"""Database models for the application."""

from blog_backend.models.blog_post import BlogPostDB
from blog_backend.models.comment import CommentDB
from blog_backend.models.user import UserDB

__all__ = ["BlogPostDB", "CommentDB", "UserDB"]
