"""Tests for logging setup."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from linguae.log_setup import LOGGER_NAME, setup_logging


@pytest.fixture
def restore_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    httpx_level = logging.getLogger("httpx").level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


def added_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_console_only(self, restore_logger: logging.Logger) -> None:
        """Test the default console configuration."""
        logger = setup_logging(logging.WARNING)

        handlers = added_handlers(logger)
        assert logger is restore_logger
        assert logger.level == logging.WARNING
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].stream is sys.stdout
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_with_log_file(
        self, restore_logger: logging.Logger, tmp_path: Path
    ) -> None:
        """Test that a rotating file handler is added for a log file."""
        log_file = tmp_path / "logs" / "linguae.log"

        logger = setup_logging(log_file=log_file, max_bytes=1024, backup_count=2)
        logging.getLogger("linguae.cache").debug("cache message")

        file_handlers = [
            h
            for h in added_handlers(logger)
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert logger.level == logging.DEBUG
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        assert file_handlers[0].backupCount == 2
        file_handlers[0].flush()
        assert "cache message" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(
        self, restore_logger: logging.Logger
    ) -> None:
        """Test that calling setup twice does not duplicate handlers."""
        _ = setup_logging()
        logger = setup_logging()

        assert len(added_handlers(logger)) == 1
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
