"""Entry points for the FastAPI app."""
import uvicorn

from api.app import app, create_app
from api.core.config import get_settings

__all__ = ["app", "create_app", "serve"]


def serve() -> None:
    settings = get_settings()
    uvicorn.run("api.app:app", host=settings.host, port=settings.port)
