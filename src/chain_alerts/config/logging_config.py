"""
Logging Setup

Configures loguru sinks for scripts and long-running monitors.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def get_log_config(level: str = "INFO") -> dict:
    """
    Get file sink configuration for loguru.

    Returns:
        Dictionary of logger.add() keyword arguments
    """
    return {
        "rotation": "10 MB",
        "retention": "10 days",
        "compression": "zip",
        "level": level,
        "format": FILE_FORMAT,
    }


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Replace the default loguru handler with console (and optional file) sinks.

    Args:
        level: Minimum level for both sinks
        log_file: Optional path for a rotating log file
    """
    level = level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, **get_log_config(level))

    logger.debug(f"Logging configured: level={level}, file={log_file}")
