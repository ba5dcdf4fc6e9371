"""JSON-lines logging for the slot machine.

Every record becomes one JSON object. Structured ``extra=`` fields are kept as
top-level keys; enum members (scenarios, rigging modes) are written as their
persisted string values and datetimes as ISO strings, so a spin log line reads
the same as the stored history entry.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict

LOG_FILE_NAME = "lucky_money_current.jsonl"

# LogRecord attributes that are not ``extra=`` fields.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_SKIP = object()


def _coerce(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Path):
        return str(value)
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return _SKIP
    return value


class JsonFormatter(logging.Formatter):
    """One JSON object per record, extras flattened into the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            coerced = _coerce(value)
            if coerced is not _SKIP:
                payload[key] = coerced
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    log_dir: Path,
    level: str = "INFO",
    logger_name: str = "lucky_money",
    console: bool = True,
) -> Logger:
    """Send ``logger_name`` records to a daily-rotated JSONL file (and stderr)."""

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    formatter = JsonFormatter()

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    file_handler = TimedRotatingFileHandler(log_file, when="midnight", backupCount=14, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    logger.propagate = False
    logger.debug("JSON logging configured", extra={"log_file": log_file})
    return logger


__all__ = ["LOG_FILE_NAME", "JsonFormatter", "configure_logging"]
