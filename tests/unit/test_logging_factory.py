"""Tests for pathguard.utils.logging_factory."""
import logging

import pytest

from pathguard.errors import PathTraversalError
from pathguard.utils.logging_factory import (
    LOG_FILE_NAME,
    PACKAGE_LOGGER,
    LoggingFactory,
    get_logger,
)
from pathguard.utils.paths import safe_repository_join
from pathguard.utils.sanitization import PathSanitizer


class TestLoggingFactoryInitialize:
    """Tests for LoggingFactory.initialize()."""

    def setup_method(self):
        LoggingFactory.reset()

    def test_console_only_by_default(self):
        LoggingFactory.initialize()
        package_logger = logging.getLogger(PACKAGE_LOGGER)

        assert LoggingFactory._initialized is True
        assert LoggingFactory._log_dir is None
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO

    def test_file_handler_with_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        LoggingFactory.initialize(log_dir=log_dir, level=logging.DEBUG)

        assert log_dir.exists()
        get_logger("pathguard.test").debug("written to file")
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()
        assert "written to file" in (log_dir / LOG_FILE_NAME).read_text()

    def test_initialize_only_once(self, tmp_path):
        LoggingFactory.initialize(level=logging.WARNING)
        LoggingFactory.initialize(log_dir=tmp_path / "ignored", level=logging.DEBUG)

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING
        assert not (tmp_path / "ignored").exists()

    def test_custom_handler(self):
        handler = logging.NullHandler()
        LoggingFactory.initialize(handler=handler)
        assert logging.getLogger(PACKAGE_LOGGER).handlers == [handler]

    def test_custom_format(self, tmp_path):
        LoggingFactory.initialize(log_dir=tmp_path, format_string="%(levelname)s|%(message)s")
        get_logger("pathguard.fmt").warning("hello")
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()
        assert "WARNING|hello" in (tmp_path / LOG_FILE_NAME).read_text()


class TestLoggingFactoryLevels:
    """Tests for level helpers."""

    def setup_method(self):
        LoggingFactory.reset()

    def test_get_logger_does_not_initialize(self):
        logger = LoggingFactory.get_logger("pathguard.utils.validation")
        assert logger.name == "pathguard.utils.validation"
        assert LoggingFactory._initialized is False

    def test_set_level(self):
        LoggingFactory.set_level("pathguard.utils.paths", logging.ERROR)
        assert logging.getLogger("pathguard.utils.paths").level == logging.ERROR
        logging.getLogger("pathguard.utils.paths").setLevel(logging.NOTSET)

    def test_configure_verbose(self):
        LoggingFactory.configure_verbose(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        LoggingFactory.configure_verbose(verbose=False)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    def test_reset_removes_handlers(self):
        LoggingFactory.initialize()
        LoggingFactory.reset()
        assert logging.getLogger(PACKAGE_LOGGER).handlers == []
        assert LoggingFactory._initialized is False


class TestRejectionLogging:
    """Library modules log rejections at DEBUG."""

    def test_sanitizer_logs_rejection(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            assert PathSanitizer.try_sanitize("../etc/passwd") is None
        assert any("traversal" in record.getMessage() for record in caplog.records)

    def test_structural_traversal_logs_warning(self, caplog, repo_root):
        with caplog.at_level(logging.WARNING, logger=PACKAGE_LOGGER):
            with pytest.raises(PathTraversalError):
                safe_repository_join(repo_root, "a/../..", "f.txt")
        assert any(record.levelno == logging.WARNING for record in caplog.records)
