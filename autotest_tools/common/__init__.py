"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared logging setup and filesystem helpers for the runner and the suites.

Exports:
    - init_logger: Initialize the loguru logger with standard settings
    - ensure_directory: Create a directory if it is missing

Usage:
    from autotest_tools.common import init_logger

    init_logger(level="DEBUG", log_file="reports/logs/autotest.log")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Falls back to LOG_LEVEL, then INFO.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.
        rotation: File rotation policy for the file sink.
        retention: File retention policy for the file sink.
        force: Re-initialize even if already configured.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="reports/logs/autotest.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()

    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    format_string = format_string or DEFAULT_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            ensure_directory(log_dir)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=rotation,
            retention=retention,
            colorize=False,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized (level={level}, file={log_file})")


# ============================================================
# Common Utilities
# ============================================================

def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "init_logger",
    "ensure_directory",
]
