#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the docsink command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"DEBUG"``. Unknown
        names fall back to WARNING.
    log_file : str, optional
        Path of a file receiving a copy of the log output.
    trace_mode : bool, default False
        Use a format with timestamps and logger names and force DEBUG level.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    if trace_mode:
        resolved_level = logging.DEBUG
    elif isinstance(log_level, int):
        resolved_level = log_level
    else:
        resolved_level = getattr(logging, str(log_level).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
