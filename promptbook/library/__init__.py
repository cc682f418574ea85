"""Promptbook library public API."""

from .base import PromptbookLibrary
from .loader import load_sources
from .registry import PromptbookRegistry, PromptbookSource

__all__ = [
    "PromptbookLibrary",
    "PromptbookRegistry",
    "PromptbookSource",
    "load_sources",
]
