"""
Pydantic models for to-do tasks.

Tasks are created open (``isCompleted`` false) and can only be changed
by completing them; there is no general update payload.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class TaskCreate(ApiModel):
    """Schema for creating a task."""

    title: str = Field(..., examples=["Write report"])
    description: Optional[str] = Field(None, examples=["Quarterly numbers"])


class TaskRead(TaskCreate):
    """Schema for a task returned by the tasks API."""

    id: int
    is_completed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
