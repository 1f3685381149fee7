"""Centralized logging setup for pathguard.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Applications (and the ``pathguard`` CLI) call
``LoggingFactory.initialize`` once to attach handlers to the ``pathguard``
logger.

Usage:
    LoggingFactory.initialize(log_dir=Path("logs"), level=logging.DEBUG)
    logger = get_logger(__name__)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "pathguard"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "pathguard.log"


class LoggingFactory:
    """Factory for creating and configuring loggers consistently.

    Initialization happens at most once per process; later calls to
    ``initialize`` are ignored.

    Class Attributes:
        _initialized: Flag to ensure single initialization
        _log_dir: Directory holding the log file, or None for console only
    """

    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def initialize(
        cls,
        log_dir: Optional[Path] = None,
        level: int = logging.INFO,
        format_string: Optional[str] = None,
        handler: Optional[logging.Handler] = None,
    ) -> None:
        """Configure the package logger once.

        Args:
            log_dir: Directory for ``pathguard.log``. No file handler if None.
            level: Level for the package logger
            format_string: Log record format (defaults to DEFAULT_FORMAT)
            handler: Console handler to use instead of a plain StreamHandler
        """
        if cls._initialized:
            return

        formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(level)

        console = handler or logging.StreamHandler()
        if handler is None:
            console.setFormatter(formatter)
        package_logger.addHandler(console)

        if log_dir:
            cls._log_dir = Path(log_dir)
            cls._log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(cls._log_dir / LOG_FILE_NAME)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

        cls._initialized = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for the given module name.

        Unlike ``initialize`` this never attaches handlers, so importing the
        library does not change the host application's logging.
        """
        return logging.getLogger(name)

    @classmethod
    def set_level(cls, name: str, level: int) -> None:
        """Set the logging level for a specific logger."""
        logging.getLogger(name).setLevel(level)

    @classmethod
    def configure_verbose(cls, verbose: bool = False) -> None:
        """Switch the package logger between DEBUG and INFO."""
        cls.set_level(PACKAGE_LOGGER, logging.DEBUG if verbose else logging.INFO)

    @classmethod
    def reset(cls) -> None:
        """Remove handlers added by ``initialize`` and allow re-initialization."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in package_logger.handlers[:]:
            handler.close()
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
        cls._log_dir = None
        cls._initialized = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return LoggingFactory.get_logger(name)
