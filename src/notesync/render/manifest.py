"""Render the flat ``llms.txt`` manifest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from notesync.models import Document
from notesync.utils.text import truncate

DEFAULT_DESCRIPTION_LIMIT = 120


@dataclass(slots=True)
class ManifestPreamble:
    title: str
    summary: str
    index_name: str = "INDEX.md"
    agents_name: str = "AGENTS.md"

    def render(self) -> str:
        return (
            f"# {self.title}\n"
            "\n"
            f"> {self.summary}\n"
            "\n"
            "## Navigation\n"
            "\n"
            f"- Start: {self.index_name}\n"
            f"- Agent instructions: {self.agents_name}\n"
        )


def summarize(document: Document, limit: int = DEFAULT_DESCRIPTION_LIMIT) -> str:
    """One-line summary: truncated description, else title, else slug."""
    if document.description:
        return truncate(document.description, limit)
    return document.display_name


def manifest_line(document: Document, limit: int = DEFAULT_DESCRIPTION_LIMIT) -> str:
    return f"- {document.path}: {document.display_name} — {summarize(document, limit)}"


def render_manifest(
    notes: Sequence[Document],
    guides: Sequence[Document],
    preamble: ManifestPreamble,
    *,
    limit: int = DEFAULT_DESCRIPTION_LIMIT,
) -> str:
    """Render notes then guides as a flat list after the fixed preamble."""
    parts: List[str] = [preamble.render(), "\n## Notes\n"]
    parts.extend(f"\n{manifest_line(note, limit)}" for note in notes)
    parts.append("\n\n## Guides\n")
    parts.extend(f"\n{manifest_line(guide, limit)}" for guide in guides)
    parts.append("\n")
    return "".join(parts)
