# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Logging
=======

Every module logs under the "rebar" logger tree. The first get_logger()
call attaches a stderr handler, so stdout carries only command output.

    logger = get_logger(__name__)   # rebar_tools.tool.rebar -> rebar.tool.rebar
    logger.debug("Rebar %s: %d position(s)", label, count)

DEBUG reports progress per rebar and position, INFO the computed result,
WARNING model quirks the reader worked around.
"""

import logging
import sys
from typing import Optional

LOGGER_PREFIX = "rebar"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

_configured = False


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """(Re)configure the "rebar" logger with a single stream handler.

    Args:
        level: Level for both the logger and its handler
        detailed: Add timestamps and line numbers to each record
        stream: Where records go, sys.stderr when omitted

    Returns:
        The "rebar" logger
    """
    global _configured

    package_logger = logging.getLogger(LOGGER_PREFIX)
    if _configured:
        package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))

    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    _configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the "rebar" tree."""
    if not _configured:
        setup_logging()

    if name.startswith("rebar_tools"):
        name = LOGGER_PREFIX + name[len("rebar_tools"):]
    elif not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Apply a level to the "rebar" logger and all of its handlers."""
    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    set_log_level(logging.INFO)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
