"""Runtime settings for path handling.

Settings are loaded with Pydantic Settings from ``PATHGUARD_*`` environment
variables and an optional ``.env`` file:

- ``PATHGUARD_DRIVE_LETTER_POLICY``: ``auto`` (Windows only), ``always`` or ``never``
- ``PATHGUARD_LOG_LEVEL``: logging level name
- ``PATHGUARD_LOG_DIR``: directory for ``pathguard.log`` (no file logging if unset)
"""
from __future__ import annotations

from pathlib import Path
from threading import Lock
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.sanitization import drive_letters_enabled as resolve_drive_letters

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""
    pass


class PathSafetySettings(BaseSettings):
    """Settings that tune sanitization and logging."""

    drive_letter_policy: Literal["auto", "always", "never"] = "auto"
    log_level: str = "INFO"
    log_dir: Optional[Path] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="PATHGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = str(v).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level

    def drive_letters_enabled(self) -> bool:
        """Resolve the drive letter policy for the current platform."""
        return resolve_drive_letters(self.drive_letter_policy)


_settings: Optional[PathSafetySettings] = None
_settings_lock = Lock()


def load_settings(env_file: Optional[Path] = None) -> PathSafetySettings:
    """Build a fresh settings instance.

    Args:
        env_file: Optional ``.env`` file to read instead of the default

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a setting fails validation
    """
    try:
        if env_file is not None:
            return PathSafetySettings(_env_file=str(env_file))
        return PathSafetySettings()
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def get_settings() -> PathSafetySettings:
    """Get the process-wide settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access reloads them."""
    global _settings
    with _settings_lock:
        _settings = None
