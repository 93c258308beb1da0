"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging

import pytest

from kennel.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _default_logging_env(monkeypatch, fresh_settings_cache):
    """Run every test against the default KENNEL_LOG_* settings."""
    for name in ("KENNEL_LOG_LEVEL", "KENNEL_LOG_FORMAT", "KENNEL_LOG_FILE_DIR", "KENNEL_ENABLE_FILE_LOGGING"):
        monkeypatch.delenv(name, raising=False)


def _console_handler():
    return next(
        (h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler),
        None,
    )


def _file_handler():
    return next(
        (h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)),
        None,
    )


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        """Test setup_logging configures correct log level."""
        setup_logging(log_level=log_level, enable_file=False)

        console_handler = _console_handler()
        assert console_handler is not None
        assert console_handler.level == expected_level

    def test_setup_logging_default_level(self):
        """Test setup_logging uses INFO as default level."""
        setup_logging(enable_file=False)

        assert _console_handler().level == logging.INFO

    def test_setup_logging_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("KENNEL_LOG_LEVEL", "ERROR")

        setup_logging(enable_file=False)

        assert _console_handler().level == logging.ERROR


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        """Test setup_logging configures correct format."""
        setup_logging(log_format=log_format, enable_file=False)

        assert _console_handler().formatter._fmt == expected_format

    def test_setup_logging_default_format(self):
        """Test setup_logging uses detailed format by default."""
        setup_logging(enable_file=False)

        assert _console_handler().formatter._fmt == DETAILED_FORMAT

    def test_setup_logging_format_with_timestamp(self):
        setup_logging(log_format="detailed", enable_file=False)

        assert _console_handler().formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_setup_logging_with_file_enabled(self, tmp_path):
        """Test setup_logging creates file handler when enabled."""
        setup_logging(enable_file=True, log_file_dir=str(tmp_path))

        file_handler = _file_handler()
        assert file_handler is not None
        assert file_handler.level == logging.DEBUG
        assert file_handler.baseFilename == str(tmp_path / LOG_FILE_NAME)

    def test_setup_logging_with_file_disabled(self):
        """Test setup_logging does not create file handler when disabled."""
        setup_logging(enable_file=False)

        assert _file_handler() is None

    def test_file_logging_disabled_by_default(self):
        setup_logging()

        assert _file_handler() is None

    def test_setup_logging_file_handler_always_debug(self, tmp_path):
        """Test file handler always logs DEBUG level."""
        setup_logging(log_level="ERROR", enable_file=True, log_file_dir=str(tmp_path))

        assert _file_handler().level == logging.DEBUG

    def test_setup_logging_creates_log_directory(self, tmp_path):
        """Test setup_logging creates log directory if it doesn't exist."""
        log_dir = tmp_path / "new_logs"
        assert not log_dir.exists()

        setup_logging(enable_file=True, log_file_dir=str(log_dir))

        assert log_dir.is_dir()


class TestSetupLoggingHandlerManagement:
    """Test setup_logging handler management."""

    def test_setup_logging_removes_existing_handlers(self):
        """Test setup_logging removes existing handlers to avoid duplicates."""
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_root_logger_level_is_debug(self):
        """Test root logger is set to DEBUG to capture all levels."""
        setup_logging(log_level="WARNING", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingModuleSpecificLevels:
    """Test module-specific log level configuration."""

    @pytest.mark.parametrize(
        "module_name,expected_level",
        [
            ("kennel", logging.INFO),
            ("kennel.core.database.adapter", logging.DEBUG),
            ("kennel.core.database.associations", logging.DEBUG),
            ("sqlalchemy", logging.WARNING),
            ("sqlalchemy.engine", logging.WARNING),
        ],
    )
    def test_module_specific_log_levels(self, module_name, expected_level):
        setup_logging(enable_file=False)

        assert logging.getLogger(module_name).level == expected_level

    def test_all_module_log_levels_configured(self):
        setup_logging(enable_file=False)

        for module_name, expected_level_str in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == getattr(logging, expected_level_str)


class TestGetLogger:
    def test_get_logger_returns_named_logger(self):
        logger = get_logger("kennel.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "kennel.test"
        assert logger is logging.getLogger("kennel.test")
