"""Tests for settings and the cached record store dependency."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from app import datastore
from app.config import Settings
from app.services.errors import RecordStoreError


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("PORT", "APP_PORT", "APP_HOST", "LOG_LEVEL", "RECORDS_PATH"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.app_port == 3000
    assert settings.app_host == "0.0.0.0"
    assert settings.records_path == Path("data/db.json")
    assert settings.log_level == "INFO"
    assert set(Settings.model_fields) == {"app_host", "app_port", "records_path", "log_level", "log_dir"}


def test_port_from_environment(clean_env):
    clean_env.setenv("PORT", "8080")

    assert Settings(_env_file=None).app_port == 8080


def test_app_port_alias(clean_env):
    clean_env.setenv("APP_PORT", "9000")

    assert Settings(_env_file=None).app_port == 9000


def test_port_out_of_range_rejected(clean_env):
    clean_env.setenv("PORT", "70000")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_log_level_normalised(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_record_store_is_loaded_once(write_records, use_records_path):
    path = write_records('{"w1": [{"reps": 10}]}')
    use_records_path(path)

    first = datastore.get_record_store()
    path.write_text('{"w1": [], "w9": []}', encoding="utf-8")

    assert datastore.get_record_store() is first
    assert datastore.get_record_service().get_record_for_workout("w1") == [{"reps": 10}]


def test_missing_record_file_fails_store_load(tmp_path, use_records_path):
    use_records_path(tmp_path / "missing.json")

    with pytest.raises(RecordStoreError):
        datastore.get_record_store()
