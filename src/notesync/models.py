"""Core notesync data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Group(str, Enum):
    """Named bucket a note is filed under in the grouped index."""

    AGENT_AUTONOMY = "Agent Autonomy"
    PROTOCOLS = "Protocols"
    INFRASTRUCTURE = "Infrastructure"
    OTHER = "Other"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Document:
    """Normalized record extracted from one source file."""

    path: str
    slug: str
    tags: Tuple[str, ...] = ()
    related: Tuple[str, ...] = ()
    title: Optional[str] = None
    description: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.title or self.slug


@dataclass(frozen=True, slots=True)
class DocumentSet:
    """Scanned documents from both collections, each in scan order."""

    notes: Tuple[Document, ...] = ()
    guides: Tuple[Document, ...] = ()

    def __len__(self) -> int:
        return len(self.notes) + len(self.guides)


@dataclass(frozen=True, slots=True)
class Artifacts:
    """Rendered text of the grouped index and the manifest."""

    index: str
    manifest: str
