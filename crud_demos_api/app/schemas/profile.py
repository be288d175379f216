"""
Pydantic models for user profiles.

A profile points at a user through ``userId``.  The referenced user is
not required to exist.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class ProfileCreate(ApiModel):
    """Schema for creating a profile."""

    user_id: int = Field(..., examples=[1])
    display_name: Optional[str] = Field(None, examples=["taro"])
    bio: Optional[str] = Field(None, examples=["Backend developer"])
    avatar_url: Optional[str] = Field(None, examples=["https://example.com/taro.png"])


class ProfileRead(ProfileCreate):
    id: int
    created_at: datetime
