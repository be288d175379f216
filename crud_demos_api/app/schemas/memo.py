"""
Pydantic models for memos.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class MemoCreate(ApiModel):
    title: str = Field(..., examples=["Shopping"])
    content: str = Field("", examples=["milk, eggs"])


class MemoUpdate(ApiModel):
    """Only provided fields are updated."""

    title: Optional[str] = None
    content: Optional[str] = None


class MemoRead(MemoCreate):
    id: int
    created_at: datetime
    updated_at: datetime
