"""
Logging setup.

Call ``configure_logging`` once at process start; everything else just asks
for a named logger with ``get_logger(__name__)``.
"""

from __future__ import annotations

import json as _json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from paths import LOG_DIR

__all__ = ["JsonFormatter", "configure_logging", "ensure_logging", "get_logger"]

ROOT_LOGGER_NAME = "arena_bot"
TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_RESERVED = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line. Extra fields passed via ``extra=`` are kept."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(payload, default=str)


def configure_logging(
    level: str | int = "INFO",
    json: bool = False,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """
    Configure the project's root logger (console + optional file).

    Safe to call more than once; previous handlers are replaced.

    Args:
        level: Logging level name or number
        json: Emit one JSON object per line instead of plain text
        log_file: Optional file name; relative names land in ``storage/logs``

    Returns:
        The configured project root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.propagate = False

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter = JsonFormatter() if json else logging.Formatter(TEXT_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is not None:
        path = Path(log_file)
        if not path.is_absolute():
            path = LOG_DIR / path
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the project root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def ensure_logging(level: str | int = "INFO", json: bool = False) -> logging.Logger:
    """
    Configure logging unless it already is.

    Used where the process may not have gone through ``main`` (e.g. a uvicorn
    reload worker importing ``api.app``); an existing setup is left alone.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return root
    return configure_logging(level=level, json=json)
