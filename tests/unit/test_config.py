"""Tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from travel_bucket_list.config import (
    DefaultsConfig,
    LogLevel,
    PlannerConfig,
    StorageConfig,
    SystemConfig,
    config,
    initialize_config,
)


def test_storage_config_from_env(monkeypatch):
    monkeypatch.setenv("DATA_DIR", "/tmp/bucket")
    monkeypatch.setenv("UNDO_WINDOW_SECONDS", "10")
    monkeypatch.setenv("SAVE_RETRY_ATTEMPTS", "5")
    storage = StorageConfig.from_env()
    assert storage.data_dir == "/tmp/bucket"
    assert storage.undo_window_seconds == 10
    assert storage.save_retry_attempts == 5


def test_system_config_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.delenv("LOG_FILE", raising=False)
    system = SystemConfig.from_env()
    assert system.log_level == LogLevel.WARNING
    assert system.log_file is None


def test_defaults_config_from_env(monkeypatch):
    monkeypatch.setenv("ANNUAL_LEAVE_DAYS", "30")
    monkeypatch.setenv("TRAVELLER_LABEL", "Sam")
    defaults = DefaultsConfig.from_env()
    assert defaults.annual_leave_days == 30
    assert defaults.traveller_label == "Sam"


def test_retry_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        StorageConfig(save_retry_attempts=0)


def test_validate_accepts_defaults(test_config):
    assert test_config.validate() is True


def test_validate_reports_reversed_timeline(test_config):
    test_config.defaults = DefaultsConfig(
        timeline_start_year=2030, timeline_end_year=2026
    )
    assert test_config.validate() is False
    with pytest.raises(PlannerConfig.ConfigurationError):
        test_config.validate(raise_error=True)


def test_validate_reports_negative_leave(test_config):
    test_config.defaults = DefaultsConfig(annual_leave_days=-1)
    assert test_config.validate() is False


def test_initialize_config_missing_file():
    with pytest.raises(FileNotFoundError):
        initialize_config("/nonexistent/path/.env")


def test_initialize_config_loads_custom_file(tmp_path, monkeypatch):
    monkeypatch.setenv("ANNUAL_LEAVE_DAYS", "25")
    monkeypatch.setenv("DATA_DIR", ".bucket_list")
    env_file = tmp_path / ".env"
    env_file.write_text(f"ANNUAL_LEAVE_DAYS=32\nDATA_DIR={tmp_path}\n")

    saved_storage, saved_defaults = config.storage, config.defaults
    try:
        loaded = initialize_config(str(env_file))

        assert loaded is config
        assert loaded.defaults.annual_leave_days == 32
        assert loaded.storage.data_dir == str(tmp_path)
    finally:
        config.storage, config.defaults = saved_storage, saved_defaults
