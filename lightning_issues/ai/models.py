"""Pydantic models for AI-generated issue suggestions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class IssueType(str, Enum):
    """Closed set of issue categories the model may propose."""

    BUG = "Bug"
    FEATURE = "Feature"
    REFACTOR = "Refactor"
    DOCUMENTATION = "Documentation"


class IssueSuggestion(BaseModel):
    """A single proposed GitHub issue."""

    model_config = ConfigDict(
        frozen=True,
        # Models occasionally add keys of their own; only the four below matter
        extra="ignore",
    )

    title: str = Field(description="Clear, professional issue title")
    body: str = Field(description="Detailed issue body in GitHub-flavored Markdown")
    type: IssueType = Field(description="Issue category")
    reasoning: str = Field(description="Short rationale for the suggestion")

    @field_validator("title", "body", "reasoning")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only text without altering it."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v


SUGGESTION_LIST_ADAPTER: TypeAdapter[list[IssueSuggestion]] = TypeAdapter(
    list[IssueSuggestion]
)
