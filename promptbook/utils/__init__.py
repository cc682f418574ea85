"""Shared utilities."""

from .monitoring import (
    log_error_with_context,
    log_performance,
    performance_timer,
    setup_logging,
)

__all__ = [
    "log_error_with_context",
    "log_performance",
    "performance_timer",
    "setup_logging",
]
