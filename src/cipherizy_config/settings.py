"""Library settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. CIPHERIZY_ENV_FILE environment variable (path to .env file)
3. config/.env in the project root

Uses pydantic-settings for automatic type coercion and validation.
Key material is never read from configuration.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. CIPHERIZY_ENV_FILE env var (relative paths resolve against project root)
    2. config/.env
    """
    env_file_path = os.environ.get("CIPHERIZY_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    env_file = _find_project_root() / "config" / ".env"
    if env_file.exists():
        return env_file

    return None


class Settings(BaseSettings):
    """Library configuration loaded from CIPHERIZY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CIPHERIZY_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Decrypted file output (None = system temp dir)
    temp_dir: Path | None = None
    temp_file_prefix: str = "cipherizy-"
    temp_file_suffix: str = ".tmp"

    @field_validator("temp_dir", mode="before")
    @classmethod
    def _empty_temp_dir_is_default(cls, v: Any) -> Any:
        """Treat an empty CIPHERIZY_TEMP_DIR as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Return cached library settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
