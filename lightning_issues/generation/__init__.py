"""Suggestion generation pipeline."""

from .models import (
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationStage,
)
from .orchestrator import GenerationOrchestrator

__all__ = [
    "GenerationOrchestrator",
    "GenerationRequest",
    "GenerationResult",
    "GenerationFailure",
    "GenerationStage",
]
