"""Top-level pytest configuration and shared fixtures.

Provides promptbook definitions in the three accepted source forms (structured
model, plain mapping, raw text) plus a Loguru capture helper.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import pytest
from loguru import logger

from promptbook.models import Prompt, PromptbookJson


def make_definition_data(url: str | None, title: str = "Sample") -> dict[str, Any]:
    """Return a valid camelCase promptbook mapping with one template."""
    data: dict[str, Any] = {
        "title": title,
        "promptbookVersion": "1.0.0",
        "parameters": [
            {"name": "topic", "isInput": True},
            {"name": "article", "isOutput": True},
        ],
        "promptTemplates": [
            {
                "name": "write-article",
                "title": "Write article",
                "content": "Write an article about {topic}",
                "resultingParameterName": "article",
            }
        ],
    }
    if url is not None:
        data["promptbookUrl"] = url
    return data


@pytest.fixture
def definition_data() -> Callable[..., dict[str, Any]]:
    """Factory for promptbook mappings."""
    return make_definition_data


@pytest.fixture
def definition_factory() -> Callable[..., PromptbookJson]:
    """Factory for structured ``PromptbookJson`` instances."""

    def _make(url: str | None, title: str = "Sample") -> PromptbookJson:
        return PromptbookJson.model_validate(make_definition_data(url, title))

    return _make


@pytest.fixture
def json_source() -> Callable[..., str]:
    """Factory for raw ``.ptbk.json`` text."""

    def _make(url: str | None, title: str = "Sample") -> str:
        return json.dumps(make_definition_data(url, title))

    return _make


@pytest.fixture
def markdown_source() -> Callable[..., str]:
    """Factory for raw ``.ptbk.md`` text with YAML front matter."""

    def _make(url: str | None, title: str = "Sample") -> str:
        url_line = f"promptbookUrl: {url}\n" if url is not None else ""
        return (
            "---\n"
            f"title: {title}\n"
            f"{url_line}"
            "promptbookVersion: 1.0.0\n"
            "parameters:\n"
            "  - name: topic\n"
            "    isInput: true\n"
            "  - name: article\n"
            "    isOutput: true\n"
            "promptTemplates:\n"
            "  - name: write-article\n"
            "    title: Write article\n"
            "    content: Write an article about {topic}\n"
            "    resultingParameterName: article\n"
            "---\n"
            "Writes a short article.\n"
        )

    return _make


@pytest.fixture
def sample_prompt() -> Prompt:
    """A prompt as produced from the sample promptbook."""
    return Prompt(
        title="Write article",
        content="Write an article about cats",
        promptbook_url="https://promptbook.example/articles.ptbk.md",
        parameters={"topic": "cats"},
    )


@pytest.fixture
def loguru_messages() -> Iterator[list[str]]:
    """Collect Loguru messages emitted during a test."""
    messages: list[str] = []

    def _sink(msg) -> None:
        messages.append(str(msg))

    sink_id = logger.add(_sink, level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(sink_id)
