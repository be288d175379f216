"""
Pydantic models for blog posts.

``PostCreate`` carries the client-supplied fields, ``PostUpdate`` names
exactly which of them may be changed by ``PUT /posts/{id}`` and
``PostRead`` adds the server-assigned fields.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class PostBase(ApiModel):
    title: str = Field(..., examples=["Hello, world"])
    content: str = Field("", examples=["First post on the demo blog"])
    author: Optional[str] = Field(None, examples=["taro"])


class PostCreate(PostBase):
    """Schema for creating a post."""
    pass


class PostUpdate(ApiModel):
    """Schema for updating a post.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


class PostRead(PostBase):
    """Schema for reading a post from the API."""

    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
