"""Frontmatter and lead-paragraph extraction for note files.

A note looks like::

    ---
    tags: [payments, x402]
    related: [escrow-flow]
    ---

    # Escrow Flow

    First paragraph, used as the description.

Only ``tags``, ``related``, the leading heading and the first paragraph are
read. Parsing never fails: anything malformed degrades to an empty or absent
field.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from notesync.models import Document
from notesync.utils.text import collapse_newlines, normalize_newlines

LOGGER = logging.getLogger(__name__)

DELIMITER = "---"

FRONTMATTER_RE = re.compile(r"\A---\n(.*?)^---$\n?", re.MULTILINE | re.DOTALL)
TITLE_RE = re.compile(r"\A#[ \t]+(.+)")


@dataclass(slots=True)
class Frontmatter:
    """Parsed fields of a single note."""

    tags: List[str] = field(default_factory=list)
    related: List[str] = field(default_factory=list)
    title: Optional[str] = None
    description: Optional[str] = None
    body: str = ""
    has_metadata: bool = False


def _list_field(block: str, key: str) -> List[str]:
    match = re.search(rf"^[ \t]*{re.escape(key)}:[ \t]*\[([^\]\n]*)\]", block, re.MULTILINE)
    if not match:
        return []
    return [token.strip() for token in match.group(1).split(",") if token.strip()]


def _lead_paragraph(text: str) -> Optional[str]:
    text = text.strip()
    if not text:
        return None
    return collapse_newlines(text.split("\n\n", 1)[0])


def parse_frontmatter(content: str) -> Frontmatter:
    """Parse the metadata block, title and description out of raw note text."""
    content = normalize_newlines(content)
    match = FRONTMATTER_RE.match(content)
    if not match:
        body = content.strip()
        return Frontmatter(description=collapse_newlines(body), body=body)

    block = match.group(1)
    body = content[match.end():].strip()

    title_match = TITLE_RE.match(body)
    if title_match:
        title: Optional[str] = title_match.group(1).strip() or None
        remainder = body[title_match.end():]
    else:
        title = None
        remainder = body

    return Frontmatter(
        tags=_list_field(block, "tags"),
        related=_list_field(block, "related"),
        title=title,
        description=_lead_paragraph(remainder),
        body=body,
        has_metadata=True,
    )


def build_document(path: str, filename: str, content: str, extension: str = ".md") -> Document:
    """Turn one raw source file into a :class:`Document`."""
    slug = filename[: -len(extension)] if extension and filename.endswith(extension) else filename
    parsed = parse_frontmatter(content)
    if not parsed.has_metadata:
        LOGGER.debug("No metadata block in %s", path)
    return Document(
        path=path,
        slug=slug,
        tags=tuple(parsed.tags),
        related=tuple(parsed.related),
        title=parsed.title,
        description=parsed.description,
    )
