"""Configuration for pathguard."""

from .settings import (
    ConfigurationError,
    PathSafetySettings,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    "ConfigurationError",
    "PathSafetySettings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
