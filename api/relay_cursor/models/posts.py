"""Pydantic models for posts."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from ..pagination import Connection


class Post(BaseModel):
    """A post as listed through the posts connection."""

    id: str = Field(description="Unique, time-ordered post key (ULID)")
    content: Optional[str] = Field(default=None, description="Post body")
    board_id: Optional[str] = Field(default=None, description="Board the post belongs to")
    created_at: datetime = Field(description="Creation timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "01HF3Z8Q6Y9J2K7M4N5P6R7S8T",
                "content": "Hello, board!",
                "boardId": "01HF3Z7A1B2C3D4E5F6G7H8J9K",
                "createdAt": "2024-01-01T12:00:00Z"
            }
        }
    )


class PostConnection(Connection[Post]):
    """Relay connection of posts, newest first."""


POST_COLUMNS = ("id", "content", "board_id", "created_at")

__all__ = ["Post", "PostConnection", "POST_COLUMNS"]
