"""
Logging setup for applications embedding the client.

The library only emits records through module loggers; nothing here runs on
import. ``setup_logging`` installs either a rich console handler or JSON
structured output, optionally with a rotating file handler.
"""

import json
import logging
import logging.handlers
import traceback
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

# Attributes every LogRecord has; anything else was passed through ``extra``
_RECORD_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message',
}


class StructuredFormatter(logging.Formatter):
    """
    Formatter for structured JSON logging.

    Converts log records to one JSON object per line, including exception
    details and any fields passed through ``extra``.
    """

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        if self.include_extra:
            extra_fields = {}
            for key, value in record.__dict__.items():
                if key in _RECORD_ATTRS:
                    continue
                try:
                    json.dumps(value)
                    extra_fields[key] = value
                except (TypeError, ValueError):
                    extra_fields[key] = str(value)

            if extra_fields:
                log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: Union[str, int] = "WARNING",
                  structured: bool = False,
                  log_file: Optional[Union[str, Path]] = None,
                  console: Optional[Console] = None) -> List[logging.Handler]:
    """Set up logging for the ``coinpaprika`` logger hierarchy.

    Args:
        level: Log level name or number
        structured: Emit JSON lines instead of rich console output
        log_file: Optional path of a rotating file handler (always JSON)
        console: Rich console to render to

    Returns:
        The handlers that were installed
    """
    resolved = _resolve_level(level)
    handlers: List[logging.Handler] = []

    if structured:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    else:
        handler = RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handlers.append(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)

    package_logger = logging.getLogger("coinpaprika")
    package_logger.setLevel(resolved)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.propagate = False

    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    return handlers
