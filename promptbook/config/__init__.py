"""Unified configuration interface.

Usage:
    from promptbook.config import settings
"""

from .settings import (
    DuplicateUrlPolicy,
    ExecutorSettings,
    PromptbookSettings,
    settings,
)

__all__ = [
    "DuplicateUrlPolicy",
    "ExecutorSettings",
    "PromptbookSettings",
    "settings",
]
