"""Logging setup for the workout records API.

``app.*`` loggers carry the service's own messages at the configured level.
uvicorn's per-request access log and the httpx client used by the test
client are held at WARNING so lookups are not logged twice.
"""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

from app.config import get_settings

LOG_FILE_NAME = "records-api.log"
FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
QUIET_LOGGERS = ("uvicorn.access", "httpx")

_configured = False


def build_config(log_dir: Path, level: str) -> dict:
    """Return the ``dictConfig`` payload writing to console and ``log_dir``."""

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
        "file": {
            "class": "logging.FileHandler",
            "filename": str(log_dir / LOG_FILE_NAME),
            "encoding": "utf-8",
            "formatter": "standard",
        },
    }
    loggers = {
        "app": {"level": level},
        "uvicorn": {"level": "INFO"},
        "uvicorn.error": {"level": "INFO"},
    }
    for name in QUIET_LOGGERS:
        loggers[name] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": FORMAT}},
        "handlers": handlers,
        "loggers": loggers,
        "root": {"level": "WARNING", "handlers": ["console", "file"]},
    }


def configure_logging(level: str | None = None, log_dir: Path | None = None) -> None:
    """
    Configure logging once per process.

    Args:
        level: Level for ``app.*`` loggers; defaults to ``LOG_LEVEL``
        log_dir: Directory for the log file; defaults to ``LOG_DIR``
    """
    global _configured
    if _configured:
        return

    if level is None or log_dir is None:
        settings = get_settings()
        level = level or settings.log_level
        log_dir = log_dir or settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(build_config(log_dir, level.upper()))
    _configured = True
