"""Rich rendering of suggestions and history."""

from datetime import datetime

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..ai.models import IssueSuggestion, IssueType
from ..github_client.links import build_new_issue_url
from ..github_client.models import RepositoryIdentifier
from ..storage.history import HistoryEntry

TYPE_STYLES = {
    IssueType.BUG: "red",
    IssueType.FEATURE: "green",
    IssueType.REFACTOR: "magenta",
    IssueType.DOCUMENTATION: "blue",
}


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch millis for display in local time."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M")


def render_suggestions(
    console: Console,
    repository: RepositoryIdentifier,
    suggestions: list[IssueSuggestion],
) -> None:
    """Print one panel per suggestion followed by its "New issue" link."""
    if not suggestions:
        console.print("[yellow]The AI did not suggest any issues.[/yellow]")
        return

    console.print(
        f"\n[bold]Suggested issues for {repository.full_name}[/bold] "
        f"({len(suggestions)})\n"
    )

    for index, suggestion in enumerate(suggestions, start=1):
        style = TYPE_STYLES.get(suggestion.type, "white")
        console.print(
            Panel(
                Markdown(suggestion.body),
                title=f"[{style}]{suggestion.type.value}[/{style}] "
                f"{index}. {escape(suggestion.title)}",
                title_align="left",
                subtitle=f"💡 {escape(suggestion.reasoning)}",
                subtitle_align="left",
                border_style=style,
            )
        )
        console.print("Create issue:", style="dim")
        console.print(build_new_issue_url(repository, suggestion), soft_wrap=True)
        console.print()


def render_history_table(console: Console, entries: list[HistoryEntry]) -> None:
    """Print the history log as a table, newest first."""
    if not entries:
        console.print("[yellow]No history yet.[/yellow]")
        return

    table = Table(title="Generation History")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Created", style="green")
    table.add_column("Repository", style="bold")
    table.add_column("Issues", justify="right")
    table.add_column("Goals", style="yellow")

    for entry in entries:
        table.add_row(
            entry.id,
            format_timestamp(entry.timestamp),
            entry.repository.full_name,
            str(len(entry.suggestions)),
            escape(entry.goals) if entry.goals else "-",
        )

    console.print(table)
