"""Unit tests for application settings and logging configuration."""

import logging
from pathlib import Path

from salary_api.config import Settings
from salary_api.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_upload_options_from_environment(monkeypatch):
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "2")
    monkeypatch.setenv("REJECT_EMPTY_NAMES", "true")

    settings = Settings()

    assert settings.max_upload_size_bytes == 2 * 1024 * 1024
    assert settings.reject_empty_names is True


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level="WARNING", log_level_sql="ERROR", log_level_ingestion="DEBUG")

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("SalaryImportService").level == logging.DEBUG


def test_setup_logging_falls_back_to_info_for_unknown_level():
    setup_logging(Settings(log_level_uvicorn="LOUD"))

    assert logging.getLogger("uvicorn.access").level == logging.INFO
