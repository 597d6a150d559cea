#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
Logging setup for GBA Fix.

Features:
- Level-specific console formats with optional colors
- Structured JSON records for machine consumption
- Optional rotating log file
- Explicit verbosity; nothing is read from the environment
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

ROOT_LOGGER_NAME = "gbafix"

DEFAULT_MAX_BYTES = 1024 * 1024
DEFAULT_BACKUP_COUNT = 3

# =====================================================================================================
# Formatters
# =====================================================================================================

class FastFormatter(logging.Formatter):
    """Compact formatter with one pre-built format per level."""

    _formats = {
        logging.ERROR: "ERROR: {message}",
        logging.WARNING: "WARNING: {message}",
        logging.INFO: "{message}",
        logging.DEBUG: "> {message}",
    }

    _colors = {
        'ERROR': '\033[91m',     # Red
        'WARNING': '\033[93m',   # Yellow
        'INFO': '\033[92m',      # Green
        'DEBUG': '\033[94m',     # Blue
    }
    _reset = '\033[0m'

    def __init__(self, enable_colors: bool = False):
        super().__init__()
        self.enable_colors = enable_colors
        self._formatters = {
            level: logging.Formatter(fmt, style='{')
            for level, fmt in self._formats.items()
        }

    def format(self, record):
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            formatter = self._formatters[logging.ERROR if record.levelno > logging.ERROR else logging.INFO]
        text = formatter.format(record)
        color = self._colors.get(record.levelname) if self.enable_colors else None
        if color:
            return f"{color}{text}{self._reset}"
        return text


class FileFormatter(logging.Formatter):
    """Timestamped format for log files."""

    def __init__(self):
        super().__init__("[{asctime}] {levelname:<7} [{name}] {message}", style='{', datefmt='%Y-%m-%d %H:%M:%S')


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter (optional)."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
        }
        error = getattr(record, "error", None)
        if isinstance(error, dict):
            payload["error"] = error
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

# =====================================================================================================
# Setup
# =====================================================================================================

def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    structured_json: bool = False,
    verbose: bool = False,
    stream=None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> Dict[str, Any]:
    """Configure the ``gbafix`` logger hierarchy.

    Calling it again replaces the handlers installed by the previous call.
    ``verbose`` forces DEBUG regardless of ``log_level``.
    """
    numeric_level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handlers = {}

    out = stream if stream is not None else sys.stderr
    console_handler = logging.StreamHandler(out)
    console_handler.setLevel(numeric_level)
    enable_colors = hasattr(out, 'isatty') and out.isatty()
    console_handler.setFormatter(JsonFormatter() if structured_json else FastFormatter(enable_colors=enable_colors))
    logger.addHandler(console_handler)
    handlers['console'] = console_handler

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JsonFormatter() if structured_json else FileFormatter())
        logger.addHandler(file_handler)
        handlers['file'] = file_handler

    logger.debug("Logging initialized (level=%s, json=%s, file=%s)",
                 logging.getLevelName(numeric_level), structured_json, log_file)

    return {
        'logger': logger,
        'handlers': handlers,
    }


def cleanup_logging() -> None:
    """Close and detach every handler of the ``gbafix`` logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
