"""Utility helper functions."""

from blog_backend.utils.helpers import host, json_body, today_str, utc_now

__all__ = ["host", "json_body", "today_str", "utc_now"]
