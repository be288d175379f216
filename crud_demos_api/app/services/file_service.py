"""
Service for uploaded files.

Uploaded payloads are written to the configured upload directory under
a generated name (``<epoch millis>-<random suffix><original extension>``)
while their metadata is kept in an ``InMemoryRepository``.  The
repository is the only source of truth for metadata; when the
metadata snapshot is enabled, ``metadata.json`` is rewritten from the
repository after every create, update and delete.

Disk writes and deletes run in a worker thread so the event loop is
not blocked.  Filesystem errors are not caught: a failed write or a
missing file on delete propagates to the caller.  On delete the file
is removed from disk before its record is dropped, so a failed unlink
leaves the record in place.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import random
import time
from pathlib import Path
from typing import List, Optional

from crud_demos_api.app.core.repository import InMemoryRepository, utcnow
from crud_demos_api.app.schemas.base import changes_from
from crud_demos_api.app.schemas.file import FileRead, FileUpdate

logger = logging.getLogger(__name__)

METADATA_FILENAME = "metadata.json"


def generate_file_name(original_name: str) -> str:
    """Build a unique stored file name keeping the original extension."""
    unique_suffix = f"{int(time.time() * 1000)}-{round(random.random() * 1e9)}"
    return unique_suffix + os.path.splitext(original_name)[1]


def _write_bytes_atomic(path: Path, data: bytes) -> None:
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_bytes(data)
    os.replace(tmp_path, path)


class FileService:
    """Service for storing uploads and managing their metadata.

    Parameters
    ----------
    upload_dir : str
        Directory the payloads are written to.  Created on first upload.
    repository : Optional[InMemoryRepository[FileRead]]
        Metadata store.  A fresh repository is created when omitted.
    metadata_snapshot : bool
        Write ``metadata.json`` after every mutation.
    """

    def __init__(
        self,
        upload_dir: str = "uploads",
        repository: Optional[InMemoryRepository[FileRead]] = None,
        *,
        metadata_snapshot: bool = False,
    ) -> None:
        self.upload_dir = Path(upload_dir)
        self.repository = repository if repository is not None else InMemoryRepository(FileRead, "file")
        self.metadata_snapshot = metadata_snapshot

    @property
    def metadata_path(self) -> Path:
        return self.upload_dir / METADATA_FILENAME

    async def _write_snapshot(self) -> None:
        if not self.metadata_snapshot:
            return
        records = [f.model_dump(mode="json", by_alias=True) for f in self.repository.list()]
        payload = json.dumps(records, ensure_ascii=False, indent=2).encode("utf-8")
        await asyncio.to_thread(self.upload_dir.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(_write_bytes_atomic, self.metadata_path, payload)
        logger.debug("Wrote metadata snapshot with %d files", len(records))

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    async def create_file(
        self,
        content: bytes,
        original_name: Optional[str],
        mime_type: Optional[str] = None,
        description: Optional[str] = None,
    ) -> FileRead:
        """Store an uploaded payload and record its metadata.

        Parameters
        ----------
        content : bytes
            Raw file content.
        original_name : Optional[str]
            Name of the file on the client.  ``"upload"`` when missing.
        mime_type : Optional[str]
            Content type announced by the client.  Defaults to
            ``application/octet-stream``.
        description : Optional[str]
            Free-form description supplied with the upload.

        Returns
        -------
        FileRead
            Metadata of the stored file.
        """
        original_name = original_name or "upload"
        file_name = generate_file_name(original_name)
        path = self.upload_dir / file_name

        await asyncio.to_thread(self.upload_dir.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(path.write_bytes, content)
        logger.debug("Wrote %d bytes to %s", len(content), path)

        record = self.repository.create(
            original_name=original_name,
            file_name=file_name,
            description=description,
            path=str(path),
            mime_type=mime_type or "application/octet-stream",
            size=len(content),
            uploaded_at=utcnow(),
        )
        logger.info("Stored file %s as %s", record.id, file_name)
        await self._write_snapshot()
        return record

    async def list_files(self) -> List[FileRead]:
        return self.repository.list()

    async def get_file(self, file_id: int) -> FileRead:
        return self.repository.get(file_id)

    async def read_content(self, file_id: int) -> bytes:
        """Return the stored bytes of a file."""
        record = self.repository.get(file_id)
        return await asyncio.to_thread(Path(record.path).read_bytes)

    async def update_file(self, file_id: int, data: FileUpdate) -> FileRead:
        record = self.repository.update(file_id, changes_from(data))
        logger.info("Updated file %s", file_id)
        await self._write_snapshot()
        return record

    async def delete_file(self, file_id: int) -> FileRead:
        """Remove the payload from disk, then drop its metadata.

        Returns the deleted record.
        """
        record = self.repository.get(file_id)
        await asyncio.to_thread(os.unlink, record.path)
        self.repository.delete(file_id)
        logger.info("Deleted file %s (%s)", file_id, record.path)
        await self._write_snapshot()
        return record
