"""CLI commands for browsing and pruning generation history."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..storage.backend import FileBackend
from ..storage.history import HistoryStore
from .display import format_timestamp, render_history_table, render_suggestions
from .generate import resolve_config
from .options import DATA_DIR_OPTION, FORCE_OPTION, FORMAT_OPTION

console = Console()
app = typer.Typer(
    help="Browse past generations. Use 'list' to see them, 'show' to reopen one, "
    "'delete' to remove one and 'clear' to remove everything.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _open_store(data_dir: Path | None) -> HistoryStore:
    config = resolve_config(data_dir=data_dir)
    return HistoryStore.open(FileBackend(config.data_dir))


@app.command(name="list")
def list_history(
    data_dir: Path | None = DATA_DIR_OPTION,
    format: str = FORMAT_OPTION,
) -> None:
    """List past generations, newest first."""
    entries = _open_store(data_dir).entries

    if format == "json":
        typer.echo(
            json.dumps(
                [entry.model_dump(mode="json") for entry in entries],
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        render_history_table(console, entries)


@app.command()
def show(
    entry_id: str = typer.Argument(..., help="History entry ID"),
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Show the suggestions of a past generation."""
    entry = _open_store(data_dir).get(entry_id)
    if entry is None:
        console.print(f"[red]❌ No history entry with ID {entry_id}[/red]")
        raise typer.Exit(1)

    console.print(f"[dim]Generated {format_timestamp(entry.timestamp)}[/dim]")
    if entry.goals:
        console.print(f"[dim]Goals:[/dim] {escape(entry.goals)}")
    render_suggestions(console, entry.repository, entry.suggestions)


@app.command()
def delete(
    entry_id: str = typer.Argument(..., help="History entry ID"),
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Delete a single history entry."""
    store = _open_store(data_dir)
    if store.get(entry_id) is None:
        console.print(f"[yellow]No history entry with ID {entry_id}[/yellow]")
        return

    remaining = store.delete(entry_id)
    console.print(
        f"[green]✓[/green] Deleted {entry_id} ({len(remaining)} entries remaining)"
    )


@app.command()
def clear(
    force: bool = FORCE_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Delete the entire history."""
    store = _open_store(data_dir)
    count = len(store.entries)

    if not force and not typer.confirm(
        f"Are you sure you want to clear your entire history ({count} entries)?"
    ):
        console.print("[yellow]History clear cancelled[/yellow]")
        return

    store.clear()
    console.print(f"[green]✓[/green] Cleared {count} history entries")
