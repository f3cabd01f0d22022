"""JSON-lines logging for strictnum.

Each record is written as one JSON object per line:

    {"timestamp": "...", "level": "warning", "category": "strictnum.services.txt",
     "message": "Text key missing", "context": {"key": "...", "file": "..."}}

Pass structured fields through ``extra={"context": {...}}``.
"""

from __future__ import annotations

import json
import logging
import os
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from strictnum.core.config import LogConfig
from strictnum.core.exceptions import ConfigError

ROOT_LOGGER = "strictnum"
MIN_MAX_BYTES = 1024


class JsonLinesFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "category": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            entry["error.type"] = record.exc_info[0].__name__
            entry["error.message"] = str(record.exc_info[1])
            entry["error.stack_trace"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(entry, default=str, ensure_ascii=False)


class _JsonLinesHandler(RotatingFileHandler):
    """Marker subclass so configure_logging can find its own handler again."""


def _validate(config: LogConfig) -> None:
    if config.max_bytes < MIN_MAX_BYTES:
        raise ConfigError(f"log.max_bytes must be >= {MIN_MAX_BYTES}, got {config.max_bytes}")
    if config.max_files < 1:
        raise ConfigError(f"log.max_files must be >= 1, got {config.max_files}")
    name = config.default_file
    if not name or os.path.basename(name) != name or name in (".", ".."):
        raise ConfigError(f"Invalid log.default_file {name!r}. Filename only, no directories.")


def configure_logging(config: LogConfig | None = None) -> logging.Logger:
    """Apply level and JSON-lines file output to the ``strictnum`` logger.

    Safe to call repeatedly: a handler installed by an earlier call is closed
    and replaced.

    Raises:
        ConfigError: Invalid rotation settings, file name, or missing directory
            when ``auto_create`` is off.
    """
    if config is None:
        config = LogConfig()
    _validate(config)

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {config.level!r}")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, _JsonLinesHandler):
            logger.removeHandler(handler)
            handler.close()

    if config.path:
        directory = Path(config.path)
        if config.auto_create:
            directory.mkdir(parents=True, exist_ok=True)
        elif not directory.is_dir():
            raise ConfigError(f"Log directory does not exist: {config.path!r}")

        handler = _JsonLinesHandler(
            directory / config.default_file,
            maxBytes=config.max_bytes,
            backupCount=config.max_files,
            encoding="utf-8",
        )
        handler.setFormatter(JsonLinesFormatter())
        logger.addHandler(handler)

    return logger
