from blog_backend.auth.permissions import AdminDep, can_modify, require_role

__all__ = ["AdminDep", "can_modify", "require_role"]
