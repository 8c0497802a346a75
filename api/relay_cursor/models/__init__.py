"""Models package for the Relay Cursor API."""

from .posts import Post, PostConnection, POST_COLUMNS

__all__ = ["Post", "PostConnection", "POST_COLUMNS"]
