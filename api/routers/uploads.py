from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse

from api.core.logging import get_logger
from api.services.upload_service import UploadError, UploadService

router = APIRouter(prefix="/api/upload", tags=["uploads"])
logger = get_logger(__name__)


@router.post("/{doc_type}")
async def upload_document(doc_type: str, request: Request, file: Optional[UploadFile] = File(None)):
    settings = request.app.state.settings
    service = UploadService(settings.upload_max_bytes, settings.upload_base_url)
    try:
        receipt = await service.accept(doc_type, file)
    except UploadError as exc:
        logger.warning("Upload of %s rejected: %s", doc_type, exc.detail)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)
    return {
        "message": receipt.message,
        "path": receipt.path,
        "filename": receipt.filename,
        "size": receipt.size,
    }
