"""Test configuration and fixtures."""

import json
from pathlib import Path

import pytest

from lightning_issues.ai.models import IssueSuggestion, IssueType
from lightning_issues.github_client.models import RepositoryIdentifier


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create temporary data directory for history files."""
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True)
    return data_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer settings from leaking into tests."""
    for name in (
        "LIGHTNING_ISSUES_MODEL",
        "LIGHTNING_ISSUES_DATA_DIR",
        "LIGHTNING_ISSUES_TIMEOUT",
        "LIGHTNING_ISSUES_MAX_ATTEMPTS",
        "LIGHTNING_ISSUES_RETRY_BACKOFF",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def repository() -> RepositoryIdentifier:
    """Sample repository identifier."""
    return RepositoryIdentifier(owner="octocat", name="Hello-World")


@pytest.fixture
def sample_suggestions() -> list[IssueSuggestion]:
    """Three suggestions covering different issue types."""
    return [
        IssueSuggestion(
            title="Fix crash on empty input",
            body="## Steps\n1. Run with no arguments\n2. Observe traceback",
            type=IssueType.BUG,
            reasoning="Several users report the crash",
        ),
        IssueSuggestion(
            title="Add dark mode",
            body="Support a dark color scheme.",
            type=IssueType.FEATURE,
            reasoning="Popular request",
        ),
        IssueSuggestion(
            title="Document the release process",
            body="Describe how releases are cut.",
            type=IssueType.DOCUMENTATION,
            reasoning="No release docs exist",
        ),
    ]


@pytest.fixture
def sample_response_text(sample_suggestions: list[IssueSuggestion]) -> str:
    """Raw model text for the sample suggestions, wrapped in prose."""
    payload = json.dumps([s.model_dump(mode="json") for s in sample_suggestions])
    return f"Here is the JSON you asked for:\n{payload}\nLet me know if you need more."
