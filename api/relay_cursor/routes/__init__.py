"""API routes for the Relay Cursor API."""

from .posts import posts_router, get_posts_executor

__all__ = ["posts_router", "get_posts_executor"]
