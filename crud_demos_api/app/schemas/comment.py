"""
Pydantic models for comments on blog posts.

The parent post id is taken from the request path, never from the
body, so ``CommentCreate`` does not declare it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class CommentCreate(ApiModel):
    """Schema for creating a comment."""

    content: str = Field(..., examples=["Nice post!"])
    author: Optional[str] = Field(None, examples=["hanako"])


class CommentRead(CommentCreate):
    """Schema for reading a comment."""

    id: int
    post_id: int
    created_at: datetime
