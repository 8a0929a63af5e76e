"""
Logging setup shared by the app, routers and repositories.

    from api.core.logging import configure_logging, get_logger

    configure_logging("INFO")
    log = get_logger(__name__)
"""

from __future__ import annotations

import logging
import logging.config
from typing import Optional


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """
    Configure root logging with a concise console formatter.

    Calling it again is a no-op unless ``force`` is set, so the app factory can
    run more than once in the same process (tests) without stacking handlers.
    """
    root = logging.getLogger()
    if getattr(root, "_records_api_configured", False) and not force:
        root.setLevel(level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "level": level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )
    root._records_api_configured = True  # type: ignore[attr-defined]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
