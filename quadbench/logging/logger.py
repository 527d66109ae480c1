# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for quadbench.

Every log entry is one JSON line, timestamped, leveled, and tagged with the
source module.

How this works:
  - Python's standard `logging` module does the plumbing; JsonFormatter
    serializes every record into a single JSON line.
  - Log lines go to stderr. Stdout belongs to the benchmark result lines,
    which other tools parse.
  - `get_logger` is the only way to create loggers in this codebase.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "quadbench.benchmark.sweep", "msg": "sweep finished", ...}
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

_STANDARD_ATTRS = frozenset({
    "name",
    "msg",
    "args",
    "created",
    "relativeCreated",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "pathname",
    "filename",
    "module",
    "levelno",
    "levelname",
    "processName",
    "process",
    "threadName",
    "thread",
    "message",
    "msecs",
    "taskName",
})


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Mandatory fields:
      ts     - ISO 8601 UTC timestamp
      level  - log level name
      module - the logger name (usually the Python module path)
      msg    - the formatted message string

    Anything passed through `extra=` is merged in as additional fields, which
    is how the driver attaches n, convention, checksum and so on.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def get_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Create a structured JSON logger.

    Args:
        name: Logger name, typically __name__ of the calling module.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  stderr and the file.

    Returns:
        A configured logging.Logger that outputs structured JSON.
    """
    logger = logging.getLogger(name)
    level = _resolve_log_level(log_level)
    logger.setLevel(level)

    # Calling get_logger twice for one name must not stack handlers.
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = JsonFormatter()

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def set_package_log_level(log_level: str) -> None:
    """Apply a level to every quadbench logger created so far."""
    level = _resolve_log_level(log_level)
    for name in list(logging.Logger.manager.loggerDict):
        if name == "quadbench" or name.startswith("quadbench."):
            logger = logging.getLogger(name)
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
