from __future__ import annotations

"""
Logging Setup for the command line.

Standard output carries the generated declarations, so diagnostics go to
stderr and, optionally, to a log file. Calling configure_logging again
replaces the handlers it installed earlier instead of stacking new ones;
handlers installed by a host build tool or test runner are left alone.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Handlers this module attached to the root logger
_installed: List[logging.Handler] = []


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity name (DEBUG ... CRITICAL).
        console: Write records to stderr.
        log_file: Also append records to this file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Point the root logger at stderr and/or a log file.

    Raises:
        ValueError: If the level name is unknown.
        OSError: If the log file cannot be opened.
    """
    level = cfg.level.strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level '{cfg.level}'. Expected one of {', '.join(_LEVELS)}.")

    reset_logging()
    root = logging.getLogger()
    root.setLevel(level)

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _install(root, console)

    if cfg.log_file:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        file_handler = logging.FileHandler(cfg.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _install(root, file_handler)

    return root


def reset_logging() -> None:
    """Detach and close every handler configure_logging installed."""
    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _install(root: logging.Logger, handler: logging.Handler) -> None:
    root.addHandler(handler)
    _installed.append(handler)
