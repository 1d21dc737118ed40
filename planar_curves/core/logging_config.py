# ==============================================================================
# Planar Curves - Curve Geometry Kernel for Lane and Road Networks
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Logging Configuration Module
=============================

Centralized logging for the curve geometry kernel.

The kernel never raises for bad input; fallible constructors return None.
Logging is how a caller finds out *why* a line, arc or biarc was not
built, so every rejection is reported at DEBUG level with its
``SegmentError`` reason.

Usage:
    from planar_curves.core.logging_config import get_logger, log_rejection

    logger = get_logger(__name__)
    log_rejection(logger, "arc segment", SegmentError.OPPOSING_DIRECTION)

Diagnosing one construction:
    enable_debug()
    Segment.biarc(start, start_direction, end, end_direction)
    disable_debug()

Log Levels:
    DEBUG    - Rejected constructions, biarc strategy choices
    INFO     - General operational messages
    WARNING  - Something unexpected but recoverable
    ERROR    - Geometry invariant violated (raised right after)
"""

import logging
import sys
from typing import Optional

# Package-wide logger name prefix
LOGGER_PREFIX = "planar"

# Default format for log messages
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

# Track if logging has been initialized
_initialized = False


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """Attach a single stream handler to the "planar" logger.

    Calling it again replaces the previous handler, so tests and host
    applications can redirect kernel diagnostics at any time.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stderr)

    Returns:
        The "planar" logger every kernel module logs through
    """
    global _initialized

    package_logger = logging.getLogger(LOGGER_PREFIX)

    # Clear existing handlers if reinitializing
    if _initialized:
        package_logger.handlers.clear()

    package_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    fmt = DETAILED_FORMAT if detailed else DEFAULT_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    package_logger.addHandler(handler)

    # Kernel output stays out of the host application's root handlers
    package_logger.propagate = False

    _initialized = True

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the "planar" hierarchy for a kernel module.

    Configures logging with the defaults on first use.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger named "planar.<module path>"

    Example:
        logger = get_logger(__name__)
        logger.debug("Rejected arc: %s", SegmentError.OPPOSING_DIRECTION.value)
    """
    if not _initialized:
        setup_logging()

    # e.g., "planar_curves.core.curves.segment" -> "planar.core.curves.segment"
    if name.startswith("planar_curves"):
        name = name.replace("planar_curves", LOGGER_PREFIX, 1)
    elif not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


def log_rejection(logger: logging.Logger, what: str, error) -> None:
    """Report a fallible constructor that returned None.

    Args:
        logger: Logger of the module doing the construction
        what: Kind of geometry that was not built, e.g. "arc segment"
        error: SegmentError giving the reason
    """
    logger.debug("Cannot build %s: %s", what, error.value)


def set_log_level(level: int) -> None:
    """Change the logging level at runtime.

    Args:
        level: New logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """Enable DEBUG level logging."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Set logging back to INFO level."""
    set_log_level(logging.INFO)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "log_rejection",
    "LOGGER_PREFIX",
]
