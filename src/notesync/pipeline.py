"""Scan, extract, render and write the derived artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from notesync.config import AppConfig
from notesync.index.classifier import group_documents
from notesync.ingestion.frontmatter import build_document
from notesync.models import Artifacts, Document, DocumentSet
from notesync.render.index import render_index
from notesync.render.manifest import render_manifest
from notesync.utils.files import is_current, read_sources, write_if_changed

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SyncStats:
    notes: int = 0
    guides: int = 0
    changed: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)

    @property
    def entries(self) -> int:
        return self.notes + self.guides

    def record(self, path: Path, changed: bool) -> None:
        if changed:
            self.changed.append(path)
        else:
            self.unchanged.append(path)


class Syncer:
    """Regenerates the grouped index and the manifest for one repository root."""

    def __init__(self, config: AppConfig, *, base_dir: Path | None = None) -> None:
        self.config = config
        self.root = config.resolve_root(base_dir)

    @property
    def index_path(self) -> Path:
        return self.root / self.config.index_name

    @property
    def manifest_path(self) -> Path:
        return self.root / self.config.manifest_name

    @property
    def agents_path(self) -> Path:
        return self.root / self.config.agents_name

    def scan(self, collection: str) -> Tuple[Document, ...]:
        """Extract every document in one collection, in filename order."""
        documents = tuple(
            build_document(path, filename, text, self.config.extension)
            for path, filename, text in read_sources(self.root, collection, self.config.extension)
        )
        LOGGER.debug("Scanned %d documents from %s", len(documents), collection)
        return documents

    def collect(self) -> DocumentSet:
        return DocumentSet(
            notes=self.scan(self.config.notes_dir),
            guides=self.scan(self.config.guides_dir),
        )

    def render(self, documents: DocumentSet) -> Artifacts:
        index = render_index(group_documents(documents.notes), documents.guides)
        manifest = render_manifest(
            documents.notes,
            documents.guides,
            self.config.preamble(),
            limit=self.config.description_limit,
        )
        return Artifacts(index=index, manifest=manifest)

    def check_agents_file(self) -> bool:
        """Report whether the agents file exists. Its content is left untouched."""
        exists = self.agents_path.is_file()
        if not exists:
            LOGGER.debug("%s not found", self.agents_path)
        return exists

    def sync(self) -> SyncStats:
        """Regenerate both artifacts on disk."""
        documents = self.collect()
        artifacts = self.render(documents)
        stats = SyncStats(notes=len(documents.notes), guides=len(documents.guides))

        for path, content in ((self.index_path, artifacts.index), (self.manifest_path, artifacts.manifest)):
            changed = write_if_changed(path, content)
            LOGGER.info("%s %s", "Wrote" if changed else "Unchanged", path)
            stats.record(path, changed)

        self.check_agents_file()
        return stats

    def check(self) -> SyncStats:
        """Render without writing and report which artifacts are out of date."""
        documents = self.collect()
        artifacts = self.render(documents)
        stats = SyncStats(notes=len(documents.notes), guides=len(documents.guides))

        for path, content in ((self.index_path, artifacts.index), (self.manifest_path, artifacts.manifest)):
            stale = not is_current(path, content)
            if stale:
                LOGGER.info("%s is out of date", path)
            stats.record(path, stale)
        return stats
