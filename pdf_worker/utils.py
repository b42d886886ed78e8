"""Utilities shared by PDF Worker modules."""

from __future__ import annotations

import logging
import time
from typing import Optional


PACKAGE_LOGGER = "pdf_worker"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return ``name``'s logger. Output goes through the single handler on the package logger."""

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.propagate = False
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level)
    return logger


def configure_logging(level: str) -> None:
    """Apply ``level`` to the package logger; module loggers inherit it."""

    get_logger(PACKAGE_LOGGER, level)


def build_output_filename(operation: str, timestamp_ms: Optional[int] = None) -> str:
    """Return ``<operation>_<timestamp>.pdf`` using the current time in milliseconds."""

    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"{operation}_{timestamp_ms}.pdf"


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


__all__ = ["get_logger", "configure_logging", "build_output_filename", "format_file_size"]
