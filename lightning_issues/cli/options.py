"""Standardized CLI option definitions shared across commands."""

import typer

MODEL_OPTION = typer.Option(
    None,
    "--model",
    "-m",
    help="AI model to use (e.g., 'google-gla:gemini-2.5-flash')",
    rich_help_panel="AI Configuration",
)

TIMEOUT_OPTION = typer.Option(
    None,
    "--timeout",
    help="Seconds to wait for the AI before giving up",
    rich_help_panel="AI Configuration",
)

MAX_ATTEMPTS_OPTION = typer.Option(
    None,
    "--max-attempts",
    help="Number of attempts for transient AI failures",
    rich_help_panel="AI Configuration",
)

DATA_DIR_OPTION = typer.Option(
    None, "--data-dir", help="Directory holding the generation history"
)

FORMAT_OPTION = typer.Option("table", "--format", help="Output format: table, json")

FORCE_OPTION = typer.Option(
    False, "--force", "-f", help="Apply changes without confirmation"
)
