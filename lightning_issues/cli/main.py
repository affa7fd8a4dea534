"""Main CLI entry point."""

import logging

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..ai.models import IssueSuggestion, IssueType
from ..github_client.links import build_new_issue_url
from ..github_client.locator import locate
from . import history
from .generate import generate

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="lightning-issues",
    help="AI-suggested GitHub issues for any public repository",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
) -> None:
    """AI-suggested GitHub issues for any public repository."""
    configure_logging(verbose)


app.command(name="generate", context_settings={"help_option_names": ["-h", "--help"]})(
    generate
)
app.add_typer(history.app, name="history")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def link(
    url: str = typer.Argument(..., help="GitHub repository URL"),
    title: str = typer.Option(..., "--title", help="Issue title"),
    body: str = typer.Option(..., "--body", help="Issue body (Markdown)"),
    issue_type: IssueType = typer.Option(
        IssueType.FEATURE, "--type", help="Issue type, mapped to a GitHub label"
    ),
) -> None:
    """Print a link that opens a pre-filled "New issue" form."""
    repository = locate(url)
    if repository is None:
        console.print("[red]❌ Please enter a valid GitHub repository URL.[/red]")
        raise typer.Exit(1)

    try:
        suggestion = IssueSuggestion(
            title=title, body=body, type=issue_type, reasoning="Written by hand"
        )
    except ValidationError as e:
        console.print(f"[red]❌ Invalid issue:[/red]\n{escape(str(e))}")
        raise typer.Exit(1) from e

    console.print(build_new_issue_url(repository, suggestion), soft_wrap=True)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from lightning_issues import __version__

    console.print(f"Lightning Issues v{__version__}")


if __name__ == "__main__":
    app()
