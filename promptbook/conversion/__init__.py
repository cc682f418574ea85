"""Conversion and validation collaborators for promptbook registries."""

from .base import DefinitionConverter, DefinitionValidator
from .converters import (
    AutoDefinitionConverter,
    JsonDefinitionConverter,
    MarkdownDefinitionConverter,
)
from .validators import PromptbookValidator, is_valid_promptbook_url

__all__ = [
    "AutoDefinitionConverter",
    "DefinitionConverter",
    "DefinitionValidator",
    "JsonDefinitionConverter",
    "MarkdownDefinitionConverter",
    "PromptbookValidator",
    "is_valid_promptbook_url",
]
