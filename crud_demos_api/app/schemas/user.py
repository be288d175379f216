"""
Pydantic models for user data.

Users are plain records referenced by profiles through ``userId``.
Nothing checks that an email is unique.
"""

from datetime import datetime

from pydantic import Field

from .base import ApiModel


class UserBase(ApiModel):
    name: str = Field(..., examples=["Taro Yamada"])
    email: str = Field(..., examples=["taro@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user."""
    pass


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    created_at: datetime
