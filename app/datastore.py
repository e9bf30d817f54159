"""Process-wide record store and the FastAPI dependencies built on it."""
from __future__ import annotations

from functools import lru_cache

from app.config import get_settings
from app.services.record_service import RecordService
from app.services.record_store import RecordStore, load


@lru_cache()
def get_record_store() -> RecordStore:
    """Load the record document once and reuse it for the process lifetime."""

    settings = get_settings()
    return load(settings.records_path)


def get_record_service() -> RecordService:
    """FastAPI dependency returning a lookup service over the shared store."""

    return RecordService(get_record_store())
