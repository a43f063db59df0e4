"""Command line interface for notesync."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from notesync.config import AppConfig
from notesync.index.classifier import classify
from notesync.pipeline import Syncer


console = Console()
app = typer.Typer(help="notesync - regenerate INDEX.md and llms.txt from notes/ and guides/")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_root(root: Optional[Path]) -> Path:
    config = AppConfig(root=root if root is not None else AppConfig().root)
    resolved = config.resolve_root(Path.cwd())
    if not resolved.is_dir():
        raise typer.BadParameter(f"Root directory not found: {resolved}")
    return resolved


def _run_sync(root: Optional[Path], check: bool, verbose: bool) -> None:
    _setup_logging(verbose)
    syncer = Syncer(AppConfig(root=_resolve_root(root)))

    if check:
        stats = syncer.check()
        if stats.changed:
            for path in stats.changed:
                console.print(f"[yellow]Out of date:[/yellow] {path.name}")
            raise typer.Exit(code=1)
        console.print("Artifacts are up to date.")
        return

    stats = syncer.sync()
    console.print(f"{syncer.config.index_name}: {stats.notes} notes, {stats.guides} guides")
    console.print(f"{syncer.config.manifest_name}: {stats.entries} entries")
    console.print("Done.")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Run `sync` on the current directory when no command is given."""
    if ctx.invoked_subcommand is None:
        _run_sync(None, check=False, verbose=False)


@app.command()
def sync(
    root: Path = typer.Option(None, "--root", help="Repository root holding notes/ and guides/"),
    check: bool = typer.Option(False, "--check", help="Exit with status 1 if artifacts are stale"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Regenerate the grouped index and the manifest."""
    _run_sync(root, check, verbose)


@app.command()
def show(
    root: Path = typer.Option(None, "--root", help="Repository root holding notes/ and guides/"),
) -> None:
    """List notes with the group each one is filed under."""
    syncer = Syncer(AppConfig(root=_resolve_root(root)))
    documents = syncer.collect()
    if not documents.notes:
        console.print("[yellow]No notes found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Group")
    table.add_column("Path")
    table.add_column("Title")
    table.add_column("Tags")

    for note in documents.notes:
        table.add_row(classify(note).display_name, note.path, note.display_name, ", ".join(note.tags))

    console.print(table)
