"""
Configuration helpers for the records backend.

Settings are read from the process environment once and cached, so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
VERCEL_DATA_DIR = Path("/tmp")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    database_url: str
    upload_max_bytes: int
    upload_base_url: str
    cors_origins: tuple[str, ...]
    log_level: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    # Serverless deployments only allow writes under /tmp
    if _bool(os.getenv("VERCEL")):
        data_dir = VERCEL_DATA_DIR
    else:
        data_dir = Path(os.getenv("DATA_DIR") or DEFAULT_DATA_DIR)

    origins = tuple(
        origin.strip() for origin in (os.getenv("CORS_ORIGINS") or "*").split(",") if origin.strip()
    )

    return Settings(
        app_env=(os.getenv("APP_ENV") or "development").lower(),
        data_dir=data_dir,
        database_url=os.getenv("DATABASE_URL", ""),
        upload_max_bytes=_int(os.getenv("UPLOAD_MAX_BYTES", "10485760"), 10 * 1024 * 1024),
        upload_base_url=os.getenv("UPLOAD_BASE_URL", "https://example.com/uploads").rstrip("/"),
        cors_origins=origins or ("*",),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "5000"), 5000),
    )
