"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"

os.environ["RECORDS_PATH"] = str(FIXTURES_DIR / "records.json")

from app.logging_config import configure_logging

configure_logging()

from app.datastore import get_record_service
from app.main import app
from app.services.record_service import RecordService
from app.services.record_store import RecordStore


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture(scope="session")
def records_fixture() -> Dict[str, Any]:
    """Return the raw record document served by the test app."""

    with (FIXTURES_DIR / "records.json").open("r", encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def record_store(records_fixture) -> RecordStore:
    return RecordStore(records_fixture)


@pytest.fixture
def override_service() -> Iterator[Callable[[Any], None]]:
    """Swap the record service used by the API, restoring it afterwards."""

    def _override(service: Any) -> None:
        app.dependency_overrides[get_record_service] = lambda: service

    yield _override
    app.dependency_overrides.pop(get_record_service, None)


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[[str], Path]:
    """Write raw text to a temporary record document and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "db.json"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def use_records_path(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[Path], None]]:
    """Point RECORDS_PATH elsewhere and reset the cached settings and store."""

    from app import datastore
    from app.config import get_settings

    def _use(path: Path) -> None:
        monkeypatch.setenv("RECORDS_PATH", str(path))
        get_settings.cache_clear()
        datastore.get_record_store.cache_clear()

    yield _use
    get_settings.cache_clear()
    datastore.get_record_store.cache_clear()
