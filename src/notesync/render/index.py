"""Render the grouped ``INDEX.md`` artifact."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from notesync.models import Document, Group

GUIDES_HEADING = "Guides"


def _entry(document: Document) -> str:
    return f"- [{document.display_name}]({document.path})\n"


def render_index(
    groups: Sequence[Tuple[Group, Sequence[Document]]],
    guides: Sequence[Document],
    *,
    heading: str = "Index",
) -> str:
    """Render classified notes and the guide list as one markdown document.

    `groups` is expected in render order; empty groups are skipped anyway.
    """
    parts: List[str] = [f"# {heading}\n"]
    for group, documents in groups:
        if not documents:
            continue
        parts.append(f"\n## {group.display_name}\n")
        parts.extend(_entry(document) for document in documents)

    if guides:
        parts.append(f"\n## {GUIDES_HEADING}\n")
        parts.extend(_entry(guide) for guide in guides)

    return "".join(parts)
