"""Utility helpers for working with the source collections on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Tuple

LOGGER = logging.getLogger(__name__)


def iter_source_paths(directory: Path, extension: str = ".md") -> Iterator[Path]:
    """Yield files directly under `directory` ending in `extension`, sorted by name.

    A missing directory yields nothing.
    """
    if not directory.is_dir():
        LOGGER.debug("Source directory %s not found, skipping", directory)
        return
    names = sorted(child.name for child in directory.iterdir() if child.name.endswith(extension))
    for name in names:
        path = directory / name
        if path.is_file():
            yield path


def read_sources(root: Path, collection: str, extension: str = ".md") -> Iterator[Tuple[str, str, str]]:
    """Yield ``(logical_path, filename, text)`` for each file in a collection.

    Undecodable bytes are replaced; other read errors propagate.
    """
    for path in iter_source_paths(root / collection, extension):
        yield f"{collection}/{path.name}", path.name, path.read_text(encoding="utf-8", errors="replace")


def is_current(path: Path, content: str) -> bool:
    """True when `path` holds exactly the UTF-8 bytes of `content`."""
    return path.is_file() and path.read_bytes() == content.encode("utf-8")


def write_if_changed(path: Path, content: str) -> bool:
    """Write `content` to `path` unless it already holds exactly that text.

    Returns True when the file was (re)written.
    """
    if is_current(path, content):
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")
    return True
