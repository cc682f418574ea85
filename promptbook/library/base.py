"""Read interface shared by promptbook libraries."""

from __future__ import annotations

from typing import Protocol

from promptbook.models import Prompt, PromptbookJson


class PromptbookLibrary(Protocol):
    """A collection of promptbooks addressable by URL."""

    def list_promptbooks(self) -> list[str]:
        """Return the URLs of all promptbooks in the library."""
        ...

    def get_promptbook_by_url(self, url: str) -> PromptbookJson:
        """Return the promptbook registered under ``url``."""
        ...

    def is_responsible_for_prompt(self, prompt: Prompt) -> bool:
        """Return whether ``prompt`` belongs to a promptbook in the library."""
        ...
