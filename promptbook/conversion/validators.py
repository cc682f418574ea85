"""Logical validation of promptbook definitions.

Checks are run in a fixed order and the first violation is reported.
"""

from __future__ import annotations

import re
from collections import Counter
from urllib.parse import urlsplit

from promptbook.errors import PromptbookLogicError
from promptbook.models import PromptbookJson, PromptTemplate

_SEMVER = re.compile(r"^\d+\.\d+\.\d+$")


def is_valid_promptbook_url(url: str) -> bool:
    """Return True for ``https://`` URLs with a host and no query or fragment."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return (
        parts.scheme == "https"
        and bool(parts.netloc)
        and not parts.query
        and not parts.fragment
    )


def validate_identity(definition: PromptbookJson) -> None:
    """Validate URL and version fields when present.

    Raises:
        PromptbookLogicError: If the URL or version is malformed.
    """
    url = definition.promptbook_url
    if url is not None and not is_valid_promptbook_url(url):
        raise PromptbookLogicError(f'Invalid promptbook URL "{url}"')
    version = definition.promptbook_version
    if version is not None and not _SEMVER.match(version):
        raise PromptbookLogicError(
            f'Invalid promptbook version "{version}", expected MAJOR.MINOR.PATCH'
        )


def validate_parameters(definition: PromptbookJson) -> None:
    """Validate parameter declarations and which template produces each one.

    Raises:
        PromptbookLogicError: On duplicate, undeclared, or doubly produced
            parameters.
    """
    counts = Counter(p.name for p in definition.parameters)
    if duplicates := sorted(name for name, n in counts.items() if n > 1):
        raise PromptbookLogicError(f"Parameters declared more than once: {duplicates}")

    declared = set(counts)
    inputs = {p.name for p in definition.parameters if p.is_input}
    producers: dict[str, str] = {}
    for template in definition.prompt_templates:
        result = template.result_parameter_name
        if result not in declared:
            raise PromptbookLogicError(
                f'Template "{template.name}" produces undeclared parameter "{result}"'
            )
        if result in inputs:
            raise PromptbookLogicError(
                f'Input parameter "{result}" cannot be produced by '
                f'template "{template.name}"'
            )
        if result in producers:
            raise PromptbookLogicError(
                f'Parameter "{result}" is produced by both "{producers[result]}" '
                f'and "{template.name}"'
            )
        producers[result] = template.name
        for dependency in template.dependent_parameter_names:
            if dependency not in declared:
                raise PromptbookLogicError(
                    f'Template "{template.name}" depends on undeclared '
                    f'parameter "{dependency}"'
                )
            if dependency == result:
                raise PromptbookLogicError(
                    f'Template "{template.name}" depends on its own result "{result}"'
                )


def validate_resolvable(definition: PromptbookJson) -> None:
    """Ensure every template can run once its dependencies are known.

    Raises:
        PromptbookLogicError: If some templates can never be resolved, e.g. a
            dependency cycle or a parameter nobody provides.
    """
    resolved = {p.name for p in definition.parameters if p.is_input}
    pending: list[PromptTemplate] = list(definition.prompt_templates)
    while pending:
        ready = [
            t
            for t in pending
            if all(d in resolved for d in t.dependent_parameter_names)
        ]
        if not ready:
            names = ", ".join(f'"{t.name}"' for t in pending)
            raise PromptbookLogicError(f"Can not resolve templates: {names}")
        resolved.update(t.result_parameter_name for t in ready)
        pending = [t for t in pending if all(t is not r for r in ready)]


class PromptbookValidator:
    """Default validator running all logical checks."""

    def validate(self, definition: PromptbookJson) -> None:
        validate_identity(definition)
        validate_parameters(definition)
        validate_resolvable(definition)


__all__ = [
    "PromptbookValidator",
    "is_valid_promptbook_url",
    "validate_identity",
    "validate_parameters",
    "validate_resolvable",
]
