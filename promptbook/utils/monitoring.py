"""Logging and timing helpers built on Loguru.

Key features:
- Console and rotating file sinks configured from settings
- Error logging with structured context
- Operation timing via a context manager
"""

import sys
import time
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from loguru import logger

from promptbook.config import settings

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{name}:{function}:{line} - {message}"
)


def setup_logging(
    log_level: str | None = None, log_file: str | Path | None = None
) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Logging level; defaults to ``settings.logging.level``.
        log_file: Optional log file path; defaults to ``settings.logging.file``.
    """
    level = log_level or settings.logging.level
    path = log_file if log_file is not None else settings.logging.file

    # Remove default handler
    logger.remove()

    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=True)

    if path:
        logger.add(
            str(path),
            level=level,
            format=_FILE_FORMAT,
            rotation=settings.logging.rotation,
            retention=settings.logging.retention,
        )

    logger.info("Logging configured: level={}, file={}", level, path)


def log_error_with_context(
    error: Exception,
    operation: str,
    context: dict[str, Any] | None = None,
    **kwargs: Any,
) -> None:
    """Log errors with context information.

    Args:
        error: The exception that was raised
        operation: Name of the operation that failed
        context: Optional context dictionary
        **kwargs: Additional context as keyword arguments
    """
    error_context = {
        "operation": operation,
        "error_type": type(error).__name__,
        "error": str(error),
    }
    if context:
        error_context.update(context)
    if kwargs:
        error_context.update(kwargs)
    logger.error("Operation failed {}", error_context)


def log_performance(operation: str, duration_seconds: float, **kwargs: Any) -> None:
    """Log a completed operation with its duration."""
    logger.debug(
        "Performance: {} took {:.3f}s {}", operation, duration_seconds, kwargs or ""
    )


@contextmanager
def performance_timer(operation: str, **context: Any) -> Generator[dict[str, Any]]:
    """Context manager for timing operations.

    Args:
        operation: Name of the operation being timed.
        **context: Additional context to log alongside metrics.

    Yields:
        Dict[str, Any]: Mutable metrics mapping updated during the operation.
    """
    start_time = time.perf_counter()
    metrics: dict[str, Any] = {"operation": operation}
    metrics.update(context)

    success = False
    try:
        yield metrics
        success = True
    finally:
        duration = time.perf_counter() - start_time
        metrics["duration_seconds"] = round(duration, 3)
        metrics["success"] = success
        excluded = {"operation", "duration_seconds"}
        extra = {k: v for k, v in metrics.items() if k not in excluded}
        log_performance(operation=operation, duration_seconds=duration, **extra)


__all__ = [
    "log_error_with_context",
    "log_performance",
    "performance_timer",
    "setup_logging",
]
