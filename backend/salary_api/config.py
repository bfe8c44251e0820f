import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Salary Records API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./salaries.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # CSV upload
    max_upload_size_mb: int = 10
    reject_empty_names: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_ingestion: str = "INFO"        # SalaryImportService pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    def model_post_init(self, __context: object) -> None:
        if self.max_upload_size_mb <= 0:
            _config_logger.warning(
                "max_upload_size_mb=%s disables the upload size limit", self.max_upload_size_mb
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
