"""Deep links into GitHub's native issue-creation page."""

from urllib.parse import urlencode

from ..ai.models import IssueSuggestion, IssueType
from .models import RepositoryIdentifier

# Mapped onto GitHub's default label set
LABEL_BY_TYPE: dict[IssueType, str] = {
    IssueType.BUG: "bug",
    IssueType.FEATURE: "enhancement",
    IssueType.DOCUMENTATION: "documentation",
    IssueType.REFACTOR: "refactor",
}


def build_new_issue_url(
    repository: RepositoryIdentifier, suggestion: IssueSuggestion
) -> str:
    """Build a URL that opens a pre-filled "New issue" form on GitHub.

    Args:
        repository: Target repository
        suggestion: Suggestion providing the title, body and label

    Returns:
        URL for ``https://github.com/{owner}/{name}/issues/new``
    """
    params = urlencode(
        {
            "title": suggestion.title,
            "body": suggestion.body,
            "labels": LABEL_BY_TYPE[suggestion.type],
        }
    )
    return f"{repository.url}/issues/new?{params}"
