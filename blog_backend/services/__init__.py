from blog_backend.services.auth import AuthService

__all__ = ["AuthService"]
