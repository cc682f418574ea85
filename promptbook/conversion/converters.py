"""Converters from raw promptbook text to ``PromptbookJson``.

Two textual forms are understood:

- ``.ptbk.json``: the JSON serialization of ``PromptbookJson``.
- ``.ptbk.md``: markdown whose YAML front matter holds the definition fields
  (camelCase keys, as in the JSON form). The markdown body becomes the
  ``description`` when the front matter does not set one.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import ValidationError

from promptbook.errors import PromptbookSyntaxError
from promptbook.models import PromptbookJson

_FRONT_MATTER_MARKER = "---\n"


def _split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from a markdown body.

    Args:
        text: Full file content.

    Returns:
        Tuple of (front_matter_dict, body_str).

    Raises:
        PromptbookSyntaxError: If the front matter is missing, unterminated,
            not valid YAML, or not a mapping.
    """
    normalized = text.replace("\r\n", "\n").lstrip("\ufeff")
    if not normalized.startswith(_FRONT_MATTER_MARKER):
        raise PromptbookSyntaxError("Promptbook markdown must start with '---'")
    try:
        _, fm, body = normalized.split(_FRONT_MATTER_MARKER, 2)
    except ValueError as exc:
        raise PromptbookSyntaxError("Front matter is missing closing '---'") from exc
    try:
        data = yaml.safe_load(fm)
    except yaml.YAMLError as exc:
        raise PromptbookSyntaxError(f"Front matter is not valid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PromptbookSyntaxError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return data, body


def _build(data: Any, source_kind: str) -> PromptbookJson:
    try:
        return PromptbookJson.model_validate(data)
    except ValidationError as exc:
        raise PromptbookSyntaxError(
            f"Invalid promptbook {source_kind}: {exc}"
        ) from exc


class JsonDefinitionConverter:
    """Parse ``.ptbk.json`` text."""

    def convert(self, text: str) -> PromptbookJson:
        try:
            return PromptbookJson.model_validate_json(text)
        except ValidationError as exc:
            raise PromptbookSyntaxError(f"Invalid promptbook JSON: {exc}") from exc


class MarkdownDefinitionConverter:
    """Parse ``.ptbk.md`` text with YAML front matter."""

    def convert(self, text: str) -> PromptbookJson:
        data, body = _split_front_matter(text)
        description = body.strip()
        if description and not data.get("description"):
            data = {**data, "description": description}
        return _build(data, "front matter")


class AutoDefinitionConverter:
    """Pick the JSON or markdown converter from the first character."""

    def __init__(
        self,
        json_converter: JsonDefinitionConverter | None = None,
        markdown_converter: MarkdownDefinitionConverter | None = None,
    ) -> None:
        self.json_converter = json_converter or JsonDefinitionConverter()
        self.markdown_converter = markdown_converter or MarkdownDefinitionConverter()

    def convert(self, text: str) -> PromptbookJson:
        if text.lstrip("\ufeff \t\r\n").startswith("{"):
            return self.json_converter.convert(text)
        return self.markdown_converter.convert(text)


__all__ = [
    "AutoDefinitionConverter",
    "JsonDefinitionConverter",
    "MarkdownDefinitionConverter",
]
