"""Tests for logging setup."""

import json
import logging
import logging.handlers
import sys

import pytest
from rich.logging import RichHandler

from coinpaprika.core.logging import StructuredFormatter, setup_logging


def _record(msg="Request failed", exc_info=None, **extra):
    record = logging.LogRecord(
        name="coinpaprika.data.client",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
        func="execute"
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test StructuredFormatter class."""

    def test_basic_fields(self):
        data = json.loads(StructuredFormatter().format(_record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "coinpaprika.data.client"
        assert data["message"] == "Request failed"
        assert data["function"] == "execute"
        assert data["line"] == 42
        assert "extra" not in data

    def test_extra_fields(self):
        data = json.loads(StructuredFormatter().format(_record(url="https://x", attempt=2)))

        assert data["extra"] == {"url": "https://x", "attempt": 2}

    def test_unserializable_extra_is_stringified(self):
        data = json.loads(StructuredFormatter().format(_record(when=object())))

        assert data["extra"]["when"].startswith("<object object")

    def test_extra_can_be_disabled(self):
        data = json.loads(StructuredFormatter(include_extra=False).format(_record(url="https://x")))

        assert "extra" not in data

    def test_exception_details(self):
        try:
            raise ValueError("bad body")
        except ValueError:
            record = _record(exc_info=sys.exc_info())

        data = json.loads(StructuredFormatter().format(record))

        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad body"
        assert data["exception"]["traceback"]


class TestSetupLogging:
    """Test setup_logging."""

    def test_rich_console_by_default(self):
        handlers = setup_logging("INFO")

        package_logger = logging.getLogger("coinpaprika")
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False
        assert package_logger.handlers == handlers
        assert isinstance(handlers[0], RichHandler)

    def test_structured(self):
        handlers = setup_logging("debug", structured=True)

        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("coinpaprika").level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "client.log"

        handlers = setup_logging("INFO", log_file=log_file)
        logging.getLogger("coinpaprika.data.client").info("hello")
        for handler in handlers:
            handler.flush()

        file_handler = handlers[-1]
        assert isinstance(file_handler, logging.handlers.RotatingFileHandler)
        assert json.loads(log_file.read_text().splitlines()[0])["message"] == "hello"
        file_handler.close()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("INFO")
        handlers = setup_logging("WARNING", structured=True)

        assert logging.getLogger("coinpaprika").handlers == handlers

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_aiohttp_quieted(self):
        setup_logging("DEBUG")

        assert logging.getLogger("aiohttp").level == logging.WARNING
