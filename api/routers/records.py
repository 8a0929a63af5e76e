"""List/create/replace/delete endpoints for the gold, animal and crops collections."""
from __future__ import annotations

from typing import Any, Optional
import re

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.core.logging import get_logger
from api.repositories.json_storage import (
    CollectionError,
    JsonDocumentStore,
    RecordCollection,
    RecordNotFoundError,
)
from api.services.collections import RECORD_COLLECTIONS, CollectionSpec, record_collection

logger = get_logger(__name__)


def get_document_store(request: Request) -> JsonDocumentStore:
    store = getattr(getattr(request.app, "state", None), "document_store", None)
    if not store:
        raise RuntimeError("Document store not configured")
    return store


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_key(raw: str) -> Optional[int]:
    """Leading ASCII integer of a path segment ('3abc' -> 3, '1.5' -> 1), or None."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def build_router(spec: CollectionSpec) -> APIRouter:
    router = APIRouter(prefix=f"/api/{spec.name}", tags=[spec.name])

    def _collection(request: Request) -> RecordCollection:
        return record_collection(get_document_store(request), spec)

    @router.get("")
    def list_records(request: Request):
        try:
            return _collection(request).all()
        except CollectionError:
            logger.exception("Error reading %s data", spec.name)
            return _error(spec.read_error, 500)

    @router.post("", status_code=201)
    def create_record(request: Request, payload: Any = Body(None)):
        try:
            return _collection(request).create({} if payload is None else payload)
        except CollectionError:
            logger.exception("Error saving %s data", spec.name)
            return _error(spec.save_error, 500)

    @router.put("/{record_id}")
    def replace_record(record_id: str, request: Request, payload: Any = Body(None)):
        key = _parse_key(record_id)
        if key is None:
            return _error(spec.not_found, 404)
        try:
            return _collection(request).replace(key, {} if payload is None else payload)
        except RecordNotFoundError:
            return _error(spec.not_found, 404)
        except CollectionError:
            logger.exception("Error updating %s record %s", spec.name, key)
            return _error(spec.update_error, 500)

    @router.delete("/{record_id}")
    def delete_record(record_id: str, request: Request):
        key = _parse_key(record_id)
        if key is None:
            return _error(spec.not_found, 404)
        try:
            _collection(request).delete(key)
        except RecordNotFoundError:
            return _error(spec.not_found, 404)
        except CollectionError:
            logger.exception("Error deleting %s record %s", spec.name, key)
            return _error(spec.delete_error, 500)
        return {"message": spec.deleted}

    return router


routers = [build_router(spec) for spec in RECORD_COLLECTIONS]
