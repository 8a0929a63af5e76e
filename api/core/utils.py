"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timezone
from typing import Optional
import time

from .config import get_settings


def utc_timestamp() -> str:
    """ISO-8601 timestamp in UTC with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def upload_url(filename: str, base: Optional[str] = None) -> str:
    """
    Build the public URL for an uploaded file: ``<base>/<epoch-millis>-<filename>``.
    """
    settings = get_settings()
    base_url = (base or settings.upload_base_url).rstrip("/")
    stamp = int(time.time() * 1000)
    return f"{base_url}/{stamp}-{filename}"
