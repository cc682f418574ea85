"""Promptbook source loader.

Scans a directory for ``.ptbk.md`` and ``.ptbk.json`` files and returns their
raw text keyed by relative path, ready for ``PromptbookRegistry.from_sources``.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from promptbook.config import settings


def load_sources(
    directory: Path | str | None = None, patterns: Iterable[str] | None = None
) -> dict[str, str]:
    """Load raw promptbook sources from disk.

    Args:
        directory: Root to scan recursively; defaults to
            ``settings.library.directory``.
        patterns: Glob patterns to match; defaults to
            ``settings.library.patterns``.

    Returns:
        Mapping of POSIX-style relative path to file content, sorted by path.

    Raises:
        FileNotFoundError: If ``directory`` does not exist.
    """
    root = Path(directory) if directory is not None else settings.library.directory
    if not root.is_dir():
        raise FileNotFoundError(f"Promptbook directory not found: {root}")
    globs = list(patterns) if patterns is not None else settings.library.patterns

    paths: set[Path] = set()
    for pattern in globs:
        paths.update(p for p in root.rglob(pattern) if p.is_file())

    sources: dict[str, str] = {}
    for path in sorted(paths):
        sources[path.relative_to(root).as_posix()] = path.read_text(encoding="utf-8")
    logger.debug("Loaded {} promptbook sources from {}", len(sources), root)
    return sources


__all__ = ["load_sources"]
