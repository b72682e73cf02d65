#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/logging_utils.py
"""Logging setup for the ``diffview`` logger namespace.

Every diffview module logs through ``logging.getLogger(__name__)``, so all
records flow through the ``diffview`` logger. ``configure_logging`` attaches
handlers to that logger only; handlers the host application installed on the
root logger or elsewhere are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "diffview"

# Marks handlers created here so a later call can replace them
_HANDLER_FLAG = "_diffview_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Send diffview's log records to stderr and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG").
    log_file : str, optional
        Path of a file that receives the same records.
    trace_mode : bool, default False
        Include timestamps and logger names, which makes the per-frame
        debug output of the scroll coordinator readable.
    propagate : bool, default False
        Also pass records on to ancestor loggers. Leave False when the root
        logger has its own handlers, or records are printed twice.

    Returns
    -------
    logging.Logger
        The configured ``diffview`` logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved_level)
    logger.propagate = propagate
    _remove_own_handlers(logger)

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = _mark(logging.StreamHandler(sys.stderr))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning(f"Could not create log file {log_file}: {exc}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(_mark(file_handler))
            logger.debug(f"Logging to file: {log_file}")

    return logger


def reset_logging() -> None:
    """Remove the handlers installed by ``configure_logging`` and restore propagation."""
    logger = logging.getLogger(LOGGER_NAME)
    _remove_own_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
