"""Document upload use case. Files are measured, never stored."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from api.core.config import get_settings
from api.core.utils import upload_url

_CHUNK_SIZE = 1024 * 1024


class UploadError(Exception):
    def __init__(self, message: str, status_code: int = 400, detail: str = ""):
        super().__init__(detail or message)
        self.message = message
        self.status_code = status_code
        self.detail = detail or message


class UploadValidationError(UploadError):
    pass


class UploadTooLargeError(UploadError):
    def __init__(self, limit: int):
        # Same body as the catch-all handler
        super().__init__("Internal server error", status_code=500, detail=f"File exceeds {limit} bytes")
        self.limit = limit


@dataclass
class UploadReceipt:
    doc_type: str
    path: str
    filename: str
    size: int

    @property
    def message(self) -> str:
        return f"{self.doc_type} uploaded successfully (simulated)"


class UploadService:
    def __init__(self, max_bytes: Optional[int] = None, base_url: Optional[str] = None) -> None:
        settings = get_settings()
        self.max_bytes = max_bytes if max_bytes is not None else settings.upload_max_bytes
        self.base_url = base_url or settings.upload_base_url

    async def _measure(self, upload: UploadFile) -> int:
        size = 0
        while True:
            chunk = await upload.read(_CHUNK_SIZE)
            if not chunk:
                return size
            size += len(chunk)
            if size > self.max_bytes:
                raise UploadTooLargeError(self.max_bytes)

    async def accept(self, doc_type: str, upload: Optional[UploadFile]) -> UploadReceipt:
        if upload is None or not upload.filename:
            raise UploadValidationError("No file uploaded")
        size = await self._measure(upload)
        filename = upload.filename
        return UploadReceipt(doc_type=doc_type, path=upload_url(filename, self.base_url), filename=filename, size=size)
