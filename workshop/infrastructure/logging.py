"""
Logging setup for the workshop service.

Installs console and optional rotating-file handlers on the root logger, with
either a plain text formatter or a JSON formatter that carries the ``extra``
fields passed by use cases and repositories.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from logging.handlers import RotatingFileHandler
from typing import Any

from workshop.application.config import LoggingConfig

# Attributes every LogRecord carries; anything else came in through ``extra``
STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured service logs."""

    def __init__(self, include_extra: bool = True, sort_keys: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra
        self.sort_keys = sort_keys

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        if self.include_extra:
            extra = {
                key: self._serialize_value(value)
                for key, value in record.__dict__.items()
                if key not in STANDARD_RECORD_FIELDS and not key.startswith("_")
            }
            if extra:
                log_entry["extra"] = extra

        return json.dumps(log_entry, sort_keys=self.sort_keys, default=self._serialize_value)

    def _serialize_value(self, value: Any) -> Any:
        """Serialize complex values for JSON output."""
        if isinstance(value, datetime):
            return value.isoformat()
        elif isinstance(value, Enum):
            return value.value
        elif isinstance(value, (set, frozenset, tuple)):
            return list(value)
        elif hasattr(value, "__dict__"):
            return str(value)
        return value


def create_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format_type == "json":
        return JSONFormatter()
    return logging.Formatter(config.format)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Setup logging for the workshop service.

    Existing root handlers are closed and replaced, so calling this again reconfigures
    logging instead of duplicating output.

    Args:
        config: Logging configuration (defaults to ``LoggingConfig()``)
    """
    config = config or LoggingConfig()

    # Clear any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = create_formatter(config)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.file:
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(getattr(logging, config.level.upper()))

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"format_type": config.format_type, "log_file": config.file},
    )
