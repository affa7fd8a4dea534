"""AI processing module for issue suggestions."""

from .client import RetryingSuggestionClient, SuggestionClient, create_suggestion_agent
from .config import DEFAULT_MODEL, validate_model_string
from .extract import extract_suggestions, isolate_json_array
from .models import IssueSuggestion, IssueType
from .prompts import build_prompt

__all__ = [
    # Models
    "IssueSuggestion",
    "IssueType",
    # Model access
    "SuggestionClient",
    "RetryingSuggestionClient",
    "create_suggestion_agent",
    "DEFAULT_MODEL",
    "validate_model_string",
    # Prompting and parsing
    "build_prompt",
    "extract_suggestions",
    "isolate_json_array",
]
