"""Centralized logging setup for the image field OCR service.

Provides a single stream handler with consistent formatting, plus a
helper for keeping OCR text snippets in log lines short.
"""

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_SNIPPET_LENGTH = 100


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger with a standard format.

    Calling this more than once leaves the existing handlers untouched.

    Args:
        level: Logging level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Stream for log records. Defaults to stdout; the CLI passes
            stderr so its stdout stays parseable JSON.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()

    if root.handlers:
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    root.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger instance.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def snippet(text: str, length: int = _SNIPPET_LENGTH) -> str:
    """Shorten text for a log line, marking truncation with ``...``."""
    if len(text) <= length:
        return text
    return text[:length] + "..."
