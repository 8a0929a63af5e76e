"""KCC / KCC-AH loan datasets: read the whole document or replace it."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.core.logging import get_logger
from api.repositories.json_storage import CollectionError
from api.routers.records import get_document_store
from api.services.collections import DOCUMENT_COLLECTIONS, CollectionSpec

logger = get_logger(__name__)


def build_router(spec: CollectionSpec) -> APIRouter:
    router = APIRouter(prefix=f"/api/{spec.name}", tags=["loans"])

    @router.get("")
    def read_document(request: Request):
        logger.debug("GET /api/%s", spec.name)
        try:
            return get_document_store(request).read(spec.name)
        except CollectionError:
            logger.exception("Error reading %s", spec.name)
            return JSONResponse({"error": spec.read_error}, status_code=500)

    @router.post("", status_code=201)
    def overwrite_document(request: Request, payload: Any = Body(None)):
        if payload is None:
            payload = {}
        store = get_document_store(request)
        try:
            with store.lock(spec.name):
                store.write(spec.name, payload)
        except CollectionError:
            logger.exception("Error saving %s", spec.name)
            return JSONResponse({"error": spec.save_error}, status_code=500)
        logger.info("Replaced %s", store.path(spec.name).name)
        return {"message": spec.overwritten}

    return router


routers = [build_router(spec) for spec in DOCUMENT_COLLECTIONS]
