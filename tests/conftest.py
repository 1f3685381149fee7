"""Global pytest fixtures and configuration.

This module provides shared fixtures for all tests including:
- Clean ``PATHGUARD_*`` environment and settings cache per test
- Logging factory reset
- A trusted repository root in a temporary directory
"""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from pathguard.config import reset_settings
from pathguard.utils.logging_factory import LoggingFactory


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Ensure no PATHGUARD_* variables leak into a test and settings reload.

    Individual tests can set variables with monkeypatch.setenv() before the
    first settings access.
    """
    for name in list(os.environ):
        if name.startswith("PATHGUARD_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI or a test attached to the package logger."""
    yield
    LoggingFactory.reset()


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Existing directory standing in for a repository working copy."""
    root = tmp_path / "repo"
    root.mkdir()
    return root
