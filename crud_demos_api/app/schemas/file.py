"""
Pydantic models for uploaded files.

The binary payload arrives as a multipart ``file`` part and is stored
on disk; these schemas describe only the metadata kept in memory.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class FileUpdate(ApiModel):
    """Schema for ``PATCH /files/{id}``.

    All fields are optional; only provided fields will be updated.
    """

    description: Optional[str] = None
    original_name: Optional[str] = None


class FileRead(ApiModel):
    """Metadata of a stored upload."""

    id: int
    original_name: str = Field(..., examples=["report.pdf"])
    file_name: str = Field(..., examples=["1718000000000-123456789.pdf"])
    description: Optional[str] = None
    path: str
    mime_type: str = Field(..., examples=["application/pdf"])
    size: int
    uploaded_at: datetime
    updated_at: Optional[datetime] = None
