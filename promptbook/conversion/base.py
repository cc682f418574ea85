"""Collaborator protocols used when building registries from sources."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from promptbook.models import PromptbookJson


@runtime_checkable
class DefinitionConverter(Protocol):
    """Turns raw promptbook text into a structured definition."""

    def convert(self, text: str) -> PromptbookJson:
        """Convert ``text`` or raise ``PromptbookSyntaxError``."""
        ...


@runtime_checkable
class DefinitionValidator(Protocol):
    """Checks a structured definition for logical consistency."""

    def validate(self, definition: PromptbookJson) -> None:
        """Return silently or raise ``PromptbookLogicError``."""
        ...
