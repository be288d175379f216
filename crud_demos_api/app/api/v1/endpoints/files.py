"""
File endpoints for API v1.

Uploads arrive as ``multipart/form-data`` with a ``file`` part and an
optional ``description`` field.  The payload is stored on disk by the
``FileService``; responses carry only metadata, except for
``GET /files/{file_id}/content`` which returns the stored bytes.

Filesystem failures (for example a payload that was removed from disk
behind the service's back) are not translated and surface as 500.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.file import FileRead, FileUpdate
from crud_demos_api.app.services.file_service import FileService
from crud_demos_api.app.services.registry import get_file_service


router = APIRouter()


@router.post("", response_model=FileRead, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    description: Optional[str] = Form(None),
    service: FileService = Depends(get_file_service),
) -> FileRead:
    """Upload a file.

    Request: multipart/form-data
    - file: binary file data (required)
    - description: free text (optional)
    """
    content = await file.read()
    return await service.create_file(
        content,
        original_name=file.filename,
        mime_type=file.content_type,
        description=description,
    )


@router.get("", response_model=List[FileRead])
async def list_files(service: FileService = Depends(get_file_service)) -> List[FileRead]:
    return await service.list_files()


@router.get("/{file_id}", response_model=FileRead)
async def get_file(file_id: int, service: FileService = Depends(get_file_service)) -> FileRead:
    try:
        return await service.get_file(file_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{file_id}/content")
async def download_file(file_id: int, service: FileService = Depends(get_file_service)) -> Response:
    """Return the stored bytes with the recorded MIME type."""
    try:
        record = await service.get_file(file_id)
        content = await service.read_content(file_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(content=content, media_type=record.mime_type)


@router.patch("/{file_id}", response_model=FileRead)
async def update_file(
    file_id: int,
    updates: FileUpdate,
    service: FileService = Depends(get_file_service),
) -> FileRead:
    """Update the description or original name of a file."""
    try:
        return await service.update_file(file_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{file_id}", response_model=FileRead)
async def delete_file(file_id: int, service: FileService = Depends(get_file_service)) -> FileRead:
    """Delete the stored payload and its metadata; return the metadata."""
    try:
        return await service.delete_file(file_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
