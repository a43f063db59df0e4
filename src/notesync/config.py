"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from notesync.render.manifest import DEFAULT_DESCRIPTION_LIMIT, ManifestPreamble

DEFAULT_MANIFEST_TITLE = "Research — Herbert McIntosh"
DEFAULT_MANIFEST_SUMMARY = (
    "Public research notes on crypto infrastructure, agent autonomy, and onchain operations. "
    "Maintained by an AI agent."
)


@dataclass(slots=True)
class AppConfig:
    root: Path = Path(".")
    notes_dir: str = "notes"
    guides_dir: str = "guides"
    extension: str = ".md"
    index_name: str = "INDEX.md"
    manifest_name: str = "llms.txt"
    agents_name: str = "AGENTS.md"
    description_limit: int = DEFAULT_DESCRIPTION_LIMIT
    manifest_title: str = DEFAULT_MANIFEST_TITLE
    manifest_summary: str = DEFAULT_MANIFEST_SUMMARY

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if Path(self.root).is_absolute() or base_dir is None:
            return Path(self.root)
        return base_dir / self.root

    def preamble(self) -> ManifestPreamble:
        return ManifestPreamble(
            title=self.manifest_title,
            summary=self.manifest_summary,
            index_name=self.index_name,
            agents_name=self.agents_name,
        )
