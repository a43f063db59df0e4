"""notesync - regenerate INDEX.md and llms.txt from markdown notes."""

__version__ = "0.1.0"
