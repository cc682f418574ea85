"""Error types raised while building and querying promptbook registries."""

from __future__ import annotations

from collections.abc import Sequence


class PromptbookError(Exception):
    """Base class for all promptbook errors."""


class PromptbookSyntaxError(PromptbookError, ValueError):
    """Raw promptbook text could not be converted into a definition."""


class PromptbookLogicError(PromptbookError, ValueError):
    """A parsed definition violates structural or logical rules."""


class MissingIdentityError(PromptbookError, ValueError):
    """A definition has no URL and therefore cannot be registered."""

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateUrlError(PromptbookError, ValueError):
    """Two sources resolve to the same URL under the reject policy."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class NotFoundError(PromptbookError, LookupError):
    """A lookup by URL did not match any registered promptbook."""

    def __init__(
        self, message: str, *, url: str, available: Sequence[str] = ()
    ) -> None:
        super().__init__(message)
        self.url = url
        self.available = list(available)


__all__ = [
    "DuplicateUrlError",
    "MissingIdentityError",
    "NotFoundError",
    "PromptbookError",
    "PromptbookLogicError",
    "PromptbookSyntaxError",
]
