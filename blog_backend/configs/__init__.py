from blog_backend.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    ROLES,
    ROOT_MESSAGE,
    TOP_COMMENTED_LIMIT,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ROLES",
    "ROOT_MESSAGE",
    "TOP_COMMENTED_LIMIT",
    "Settings",
    "settings",
]
