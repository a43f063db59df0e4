"""Small text helpers shared by the extractor and the renderers."""

from __future__ import annotations


def normalize_newlines(text: str) -> str:
    """Convert CRLF and bare CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def collapse_newlines(text: str) -> str:
    """Replace every newline with a single space and trim the result."""
    return text.replace("\n", " ").strip()


def truncate(text: str, limit: int) -> str:
    """Cut text to at most `limit` characters.

    The cut is a hard one: no word boundary search and no ellipsis.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return text[:limit]
