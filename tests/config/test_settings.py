"""Tests for application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.config.settings import LedgerSettings, Settings, StorageSettings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_ledger_defaults():
    settings = LedgerSettings()
    assert settings.underflow_policy == "floor"
    assert settings.default_actor == "system"


def test_ledger_policy_from_env(monkeypatch):
    monkeypatch.setenv("LEDGER_UNDERFLOW_POLICY", "reject")
    assert LedgerSettings().underflow_policy == "reject"


def test_unknown_policy_rejected(monkeypatch):
    monkeypatch.setenv("LEDGER_UNDERFLOW_POLICY", "clamp")
    with pytest.raises(PydanticValidationError):
        LedgerSettings()


def test_db_path(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STORAGE_DB_NAME", "shop.db")
    assert StorageSettings().db_path == tmp_path / "shop.db"


def test_storage_dict_creates_data_dir(tmp_path: Path):
    data_dir = tmp_path / "nested" / "data"
    settings = Settings(storage={"data_dir": data_dir})
    assert settings.storage.data_dir == data_dir
    assert data_dir.exists()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
