"""Request and result models for suggestion generation."""

from enum import Enum

from pydantic import BaseModel, Field

from ..ai.models import IssueSuggestion
from ..errors import ErrorCategory
from ..github_client.models import RepositoryIdentifier


class GenerationStage(str, Enum):
    """Pipeline state of a generation run."""

    IDLE = "idle"
    VALIDATING = "validating"
    INVOKING = "invoking"
    EXTRACTING = "extracting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


class GenerationRequest(BaseModel):
    """User input for a generation run. Never persisted."""

    repository_url: str = Field(description="Repository URL as entered")
    goals: str | None = Field(default=None, description="Optional project goals")
    scan_todos: bool = Field(default=False, description="Look for TODO markers")


class GenerationFailure(BaseModel):
    """Typed failure of a generation run."""

    category: ErrorCategory
    message: str = Field(description="Short, user-facing explanation")
    stage: GenerationStage = Field(description="Stage that failed")


class GenerationResult(BaseModel):
    """Outcome of a generation run: suggestions or a failure."""

    repository: RepositoryIdentifier | None = None
    suggestions: list[IssueSuggestion] = Field(default_factory=list)
    failure: GenerationFailure | None = None
    stage: GenerationStage = GenerationStage.SUCCEEDED

    @property
    def succeeded(self) -> bool:
        """Whether the run produced suggestions without error."""
        return self.failure is None
