"""Promptbook registry.

Immutable, URL-keyed store of promptbook definitions built once from a set of
named sources. Sources may be structured definitions or raw text; raw text is
converted and every definition is validated before it is registered.

Construction stops at the first failing source: the error propagates and no
registry is returned.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeAlias

from loguru import logger
from pydantic import ValidationError

from promptbook.config import settings as app_settings
from promptbook.config.settings import DuplicateUrlPolicy, ExecutorSettings
from promptbook.conversion import (
    AutoDefinitionConverter,
    DefinitionConverter,
    DefinitionValidator,
    PromptbookValidator,
)
from promptbook.errors import (
    DuplicateUrlError,
    MissingIdentityError,
    NotFoundError,
    PromptbookLogicError,
)
from promptbook.models import Prompt, PromptbookJson
from promptbook.utils.monitoring import log_error_with_context, performance_timer

from .loader import load_sources

PromptbookSource: TypeAlias = PromptbookJson | Mapping[str, Any] | str


def _missing_identity_message(name: str) -> str:
    return (
        f'Promptbook with name "{name}" does not have defined URL\n'
        "\n"
        "Note: Promptbooks without URLs are called anonymous promptbooks\n"
        "      They can be used as standalone promptbooks, "
        "but they cannot be referenced by other promptbooks\n"
        "      And also they cannot be used in the promptbook library"
    )


def _not_found_message(url: str, available: list[str]) -> str:
    listing = "\n".join(f"- {item}" for item in available)
    return f'Promptbook with url "{url}" not found\n\nAvailable promptbooks:\n{listing}'


def _to_definition(
    name: str, source: PromptbookSource, converter: DefinitionConverter
) -> PromptbookJson:
    if isinstance(source, PromptbookJson):
        return source
    if isinstance(source, str):
        return converter.convert(source)
    if isinstance(source, Mapping):
        try:
            return PromptbookJson.model_validate(dict(source))
        except ValidationError as exc:
            raise PromptbookLogicError(
                f'Promptbook with name "{name}" is not a valid definition: {exc}'
            ) from exc
    raise TypeError(
        f'Promptbook with name "{name}" has unsupported source type '
        f"{type(source).__name__}"
    )


class PromptbookRegistry:
    """Library of promptbooks keyed by their URL.

    Prefer ``from_sources`` or ``from_directory``; the constructor trusts its
    input and performs no validation.
    """

    def __init__(
        self,
        library: Mapping[str, PromptbookJson],
        settings: ExecutorSettings | None = None,
    ) -> None:
        self._library: Mapping[str, PromptbookJson] = MappingProxyType(dict(library))
        self.settings = settings

    @classmethod
    def from_sources(
        cls,
        sources: Mapping[str, PromptbookSource],
        settings: ExecutorSettings | None = None,
        *,
        converter: DefinitionConverter | None = None,
        validator: DefinitionValidator | None = None,
        duplicate_policy: DuplicateUrlPolicy | str | None = None,
    ) -> PromptbookRegistry:
        """Build a registry from named sources.

        Args:
            sources: Mapping of diagnostic name to a definition, a plain
                mapping in the JSON shape, or raw ``.ptbk.md``/``.ptbk.json``
                text.
            settings: Optional executor settings carried by the registry.
            converter: Converts raw text; defaults to
                ``AutoDefinitionConverter``.
            validator: Validates every definition; defaults to
                ``PromptbookValidator``.
            duplicate_policy: Behaviour when two sources share a URL; defaults
                to ``settings.library.duplicate_policy``.

        Returns:
            A fully populated registry.

        Raises:
            PromptbookSyntaxError: Raw text could not be converted.
            PromptbookLogicError: A definition failed validation.
            MissingIdentityError: A definition has no URL.
            DuplicateUrlError: A URL repeats under the reject policy.
        """
        converter = converter or AutoDefinitionConverter()
        validator = validator or PromptbookValidator()
        policy = DuplicateUrlPolicy(
            duplicate_policy or app_settings.library.duplicate_policy
        )

        library: dict[str, PromptbookJson] = {}
        origins: dict[str, str] = {}
        name: str | None = None
        with performance_timer(
            "promptbook_registry.from_sources", sources=len(sources)
        ) as metrics:
            try:
                for name, source in sources.items():
                    definition = _to_definition(name, source, converter)
                    validator.validate(definition)

                    url = definition.promptbook_url
                    if not url:
                        raise MissingIdentityError(
                            _missing_identity_message(name), name=name
                        )

                    if url in library:
                        if policy is DuplicateUrlPolicy.REJECT:
                            raise DuplicateUrlError(
                                f'Promptbook with name "{name}" has URL "{url}" '
                                f'already registered by "{origins[url]}"',
                                url=url,
                            )
                        logger.warning(
                            "Promptbook {} from {} overwrites the one from {}",
                            url,
                            name,
                            origins[url],
                        )

                    library[url] = definition
                    origins[url] = name
                    logger.debug("Registered promptbook {} from {}", url, name)
            except Exception as exc:
                log_error_with_context(
                    exc, "promptbook_registry.from_sources", source_name=name
                )
                raise
            metrics["registered"] = len(library)

        logger.info(
            "Promptbook registry built: {} promptbooks from {} sources",
            len(library),
            len(sources),
        )
        return cls(library, settings)

    @classmethod
    def from_directory(
        cls,
        directory: Path | str | None = None,
        settings: ExecutorSettings | None = None,
        **kwargs: Any,
    ) -> PromptbookRegistry:
        """Build a registry from ``.ptbk.md``/``.ptbk.json`` files on disk.

        Keyword arguments are forwarded to ``from_sources``.
        """
        return cls.from_sources(load_sources(directory), settings, **kwargs)

    def list_promptbooks(self) -> list[str]:
        """Return all registered URLs in insertion order."""
        return list(self._library)

    def get_promptbook_by_url(self, url: str) -> PromptbookJson:
        """Return the promptbook registered under ``url``.

        This is a lookup in the registry, not a fetch from the URL.

        Raises:
            NotFoundError: If no promptbook is registered under ``url``; the
                message lists every available URL.
        """
        promptbook = self._library.get(url)
        if promptbook is None:
            available = self.list_promptbooks()
            raise NotFoundError(
                _not_found_message(url, available), url=url, available=available
            )
        return promptbook

    def is_responsible_for_prompt(self, prompt: Prompt) -> bool:
        """Return whether ``prompt`` was defined by a promptbook in the registry.

        Currently every prompt is claimed.
        """
        # TODO: match prompt.promptbook_url and template content against the
        # registered promptbooks instead of claiming every prompt
        logger.debug("Claiming prompt {!r} without matching", prompt.title)
        return True

    def __len__(self) -> int:
        return len(self._library)

    def __contains__(self, url: object) -> bool:
        return url in self._library

    def __iter__(self) -> Iterator[str]:
        return iter(self._library)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.list_promptbooks()!r})"


__all__ = ["PromptbookRegistry", "PromptbookSource"]
