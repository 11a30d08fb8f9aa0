"""Runtime configuration loaded from the environment."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from f1results._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Settings read from ``F1RESULTS_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="F1RESULTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Racing-data service endpoint
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    # Logging
    log_dir: Path = Path("./logs")
    log_level: str = "INFO"

    @property
    def log_file(self) -> Path:
        """File that receives API and service call logs."""
        return self.log_dir / "api_calls.log"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
