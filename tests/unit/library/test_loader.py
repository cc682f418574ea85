"""Unit tests for loading promptbook sources from disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from promptbook.library import PromptbookRegistry, load_sources


@pytest.mark.unit
def test_load_sources_matches_patterns(tmp_path: Path, json_source, markdown_source):
    (tmp_path / "nested").mkdir()
    (tmp_path / "a.ptbk.json").write_text(json_source("https://x/a"), "utf-8")
    (tmp_path / "nested" / "b.ptbk.md").write_text(
        markdown_source("https://x/b"), "utf-8"
    )
    (tmp_path / "notes.md").write_text("ignored", "utf-8")

    sources = load_sources(tmp_path)

    assert list(sources) == ["a.ptbk.json", "nested/b.ptbk.md"]
    assert sources["a.ptbk.json"].startswith("{")


@pytest.mark.unit
def test_load_sources_custom_patterns(tmp_path: Path, json_source) -> None:
    (tmp_path / "a.ptbk.json").write_text(json_source("https://x/a"), "utf-8")
    (tmp_path / "b.ptbk.md").write_text("---\n---\n", "utf-8")

    assert list(load_sources(tmp_path, patterns=["*.ptbk.json"])) == ["a.ptbk.json"]


@pytest.mark.unit
def test_load_sources_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_sources(tmp_path / "missing")


@pytest.mark.unit
def test_load_sources_defaults_to_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, json_source
) -> None:
    from promptbook.config import settings

    (tmp_path / "a.ptbk.json").write_text(json_source("https://x/a"), "utf-8")
    monkeypatch.setattr(settings.library, "directory", tmp_path)

    registry = PromptbookRegistry.from_directory()
    assert registry.list_promptbooks() == ["https://x/a"]
