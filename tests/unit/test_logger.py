"""
Test suite for logging configuration.

System role: Verification of observability setup
"""

import logging

import pytest

from astrogrid.configs import get_settings
from astrogrid.observability import configure_logging, get_logger
from astrogrid.observability.logger import ContextFormatter


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after configure_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestContextFormatter:
    """Test suite for ContextFormatter."""

    def test_format_should_append_extra_fields(self) -> None:
        """Test extra={...} context is rendered after the message."""
        # Arrange
        formatter = ContextFormatter("%(levelname)s %(message)s")
        record = get_logger("astrogrid.test").makeRecord(
            "astrogrid.test",
            logging.WARNING,
            __file__,
            1,
            "Unknown collection: widgets",
            (),
            None,
            extra={"collection": "widgets"},
        )

        # Act
        line = formatter.format(record)

        # Assert
        assert line == "WARNING Unknown collection: widgets | collection='widgets'"

    def test_format_should_leave_plain_records_unchanged(self) -> None:
        """Test records without extra context are not decorated."""
        # Arrange
        formatter = ContextFormatter("%(message)s")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "ready", (), None)

        # Act & Assert
        assert formatter.format(record) == "ready"


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_configure_should_install_single_stdout_handler(self, restore_root_logger) -> None:
        """Test repeated configuration does not stack handlers."""
        # Act
        configure_logging("debug")
        configure_logging("debug")

        # Assert
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, ContextFormatter)
        assert restore_root_logger.level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_log_level_setting_should_be_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test LOG_LEVEL is accepted in any case."""
        # Arrange
        monkeypatch.setenv("LOG_LEVEL", "warning")

        # Act & Assert
        assert get_settings().log_level == "WARNING"
