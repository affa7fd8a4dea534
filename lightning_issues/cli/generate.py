"""Suggestion generation command."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..ai.client import RetryingSuggestionClient, SuggestionClient, SuggestionInvoker
from ..config import AppConfig
from ..generation.models import GenerationRequest
from ..generation.orchestrator import GenerationOrchestrator
from ..storage.backend import FileBackend
from ..storage.history import HistoryStore
from .display import render_suggestions
from .options import (
    DATA_DIR_OPTION,
    FORMAT_OPTION,
    MAX_ATTEMPTS_OPTION,
    MODEL_OPTION,
    TIMEOUT_OPTION,
)

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def resolve_config(**overrides: Any) -> AppConfig:
    """Merge CLI overrides onto the environment configuration.

    Options left unset (None) keep the environment or default value.
    Exits with status 1 if the result is invalid.
    """
    try:
        config = AppConfig.from_env()
        updates = {key: value for key, value in overrides.items() if value is not None}
        return AppConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        console.print(f"[red]❌ Invalid configuration:[/red]\n{escape(str(e))}")
        raise typer.Exit(1) from e


def build_client(config: AppConfig) -> SuggestionInvoker:
    """Create the model client, wrapped in retries when configured."""
    client: SuggestionInvoker = SuggestionClient(model=config.model)
    if config.max_attempts > 1:
        client = RetryingSuggestionClient(
            client,
            max_attempts=config.max_attempts,
            backoff_seconds=config.retry_backoff,
        )
    return client


def generate(
    url: str = typer.Argument(..., help="GitHub repository URL"),
    goals: str | None = typer.Option(
        None,
        "--goals",
        "-g",
        help="Project goals at least one suggestion should align with",
        rich_help_panel="Suggestion Options",
    ),
    scan_todos: bool = typer.Option(
        False,
        "--scan-todos",
        "-t",
        help="Look for TODO/FIXME/HACK comments and prioritize resolving them",
        rich_help_panel="Suggestion Options",
    ),
    model: str | None = MODEL_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
    max_attempts: int | None = MAX_ATTEMPTS_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
    save: bool = typer.Option(
        True, "--save/--no-save", help="Record successful results in history"
    ),
    format: str = FORMAT_OPTION,
) -> None:
    """Suggest GitHub issues for a repository.

    The AI researches the repository with web search and proposes issues,
    each with a link that opens a pre-filled "New issue" form on GitHub.

    Examples:

        # Three suggestions for a repository
        lightning-issues generate https://github.com/octocat/Hello-World

        # Steer suggestions towards your goals
        lightning-issues generate https://github.com/octocat/Hello-World \\
            --goals "Improve test coverage"

        # Turn TODO comments into issues
        lightning-issues generate https://github.com/octocat/Hello-World --scan-todos
    """
    config = resolve_config(
        model=model, timeout=timeout, max_attempts=max_attempts, data_dir=data_dir
    )
    orchestrator = GenerationOrchestrator(build_client(config), timeout=config.timeout)
    request = GenerationRequest(repository_url=url, goals=goals, scan_todos=scan_todos)

    with console.status("[bold green]Analyzing repository..."):
        result = asyncio.run(orchestrator.generate(request))

    if result.failure is not None or result.repository is None:
        message = result.failure.message if result.failure else "Generation failed."
        console.print(f"[red]❌ {message}[/red]")
        raise typer.Exit(1)

    entry_id = None
    if save:
        store = HistoryStore.open(FileBackend(config.data_dir))
        try:
            entry_id = store.record(request, result).id
        except OSError as e:
            logger.error("Could not save history to %s: %s", config.data_dir, e)
            err_console.print(
                f"[yellow]⚠️  Could not save to history: {escape(str(e))}[/yellow]"
            )

    if format == "json":
        typer.echo(
            json.dumps(
                [suggestion.model_dump(mode="json") for suggestion in result.suggestions],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    render_suggestions(console, result.repository, result.suggestions)
    if entry_id:
        console.print(f"[dim]Saved to history as {entry_id}[/dim]")
