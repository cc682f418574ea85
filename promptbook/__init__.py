"""Promptbook - URL-addressed promptbook registry and remote execution contract.

Builds immutable registries of promptbook definitions from JSON, markdown, or
already structured sources, and defines the request a client sends to have a
remote server execute a prompt.
"""

__version__ = "0.1.0"

from .config import settings
from .errors import (
    DuplicateUrlError,
    MissingIdentityError,
    NotFoundError,
    PromptbookError,
    PromptbookLogicError,
    PromptbookSyntaxError,
)
from .library import PromptbookLibrary, PromptbookRegistry
from .models import Prompt, PromptbookJson
from .remote import RemoteExecutionRequest

__all__ = [
    "DuplicateUrlError",
    "MissingIdentityError",
    "NotFoundError",
    "Prompt",
    "PromptbookError",
    "PromptbookJson",
    "PromptbookLibrary",
    "PromptbookLogicError",
    "PromptbookRegistry",
    "PromptbookSyntaxError",
    "RemoteExecutionRequest",
    "settings",
]
