from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.core.config import Settings, get_settings
from api.core.logging import configure_logging, get_logger
from api.core.utils import utc_timestamp
from api.repositories.json_storage import JsonDocumentStore
from api.routers import loans as loans_router
from api.routers import records as records_router
from api.routers import uploads as uploads_router
from api.routers import users as users_router
from api.services.collections import initialize_collections

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application (compatible with uvicorn/gunicorn factories)."""
    settings = settings or get_settings()
    store = JsonDocumentStore(settings.data_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        created = initialize_collections(store)
        logger.info(
            "Data files ready in %s (%d created, environment=%s)",
            store.data_dir,
            len(created),
            settings.app_env,
        )
        yield

    app = FastAPI(title="Farm Records API", lifespan=lifespan)
    app.state.settings = settings
    app.state.document_store = store

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else sorted(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse({"error": "Invalid request"}, status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Server error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    @app.get("/health")
    def health():
        return {
            "status": "OK",
            "message": "Server is running",
            "environment": settings.app_env,
            "timestamp": utc_timestamp(),
        }

    for router in loans_router.routers:
        app.include_router(router)
    for router in records_router.routers:
        app.include_router(router)
    app.include_router(users_router.router)
    app.include_router(uploads_router.router)

    return app


app = create_app()
