"""Logging configuration for cvar-console.

Attaches a stream or file handler to the ``cvar_console`` logger and turns
command exceptions into one-line messages while the full traceback goes to
the log.
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

LOGGER_NAME = "cvar_console"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Module-level state
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int | str = logging.WARNING,
    log_file: Optional[Path] = None,
) -> logging.Handler:
    """Configure logging for the console.

    Replaces any handler installed by a previous call.

    Args:
        level: Logging level, as a number or name ("DEBUG", "INFO", ...)
        log_file: Append to this file instead of writing to stderr

    Returns:
        The installed handler
    """
    global _handler

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    close_logging()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)

    _handler = handler
    return handler


def close_logging() -> None:
    """Remove and close the handler installed by configure_logging()."""
    global _handler

    if _handler is not None:
        logging.getLogger(LOGGER_NAME).removeHandler(_handler)
        _handler.close()
        _handler = None


def log_command_exception(
    error: Exception,
    context: str = "",
    include_traceback: bool = True,
) -> str:
    """Log a command exception with full details.

    Args:
        error: The exception to log
        context: What was happening (e.g. the command line)
        include_traceback: Whether to include the traceback in the log

    Returns:
        One-line message (without traceback)
    """
    logger = logging.getLogger(LOGGER_NAME)

    error_type = type(error).__name__
    error_msg = str(error)
    user_msg = f"{error_type}: {error_msg}"

    if include_traceback:
        tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        log_msg = f"{context}\n{error_type}: {error_msg}\n\nTraceback:\n{tb_str}"
    else:
        log_msg = f"{context} - {error_type}: {error_msg}"

    logger.error(log_msg)

    return user_msg
