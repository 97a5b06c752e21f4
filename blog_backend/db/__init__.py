from blog_backend.db.database import Database

__all__ = ["Database"]
