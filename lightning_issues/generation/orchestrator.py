"""Sequence locate -> prompt -> invoke -> extract into one generation run."""

import asyncio
import logging

from ..ai.client import SuggestionInvoker
from ..ai.extract import extract_suggestions
from ..ai.prompts import build_prompt
from ..errors import (
    GenerationCancelledError,
    GenerationError,
    InvalidInputError,
    ParseError,
)
from ..github_client.locator import locate
from ..github_client.models import RepositoryIdentifier
from .models import (
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationStage,
)

logger = logging.getLogger(__name__)


class GenerationOrchestrator:
    """Run the suggestion pipeline and classify its failures.

    Failures are returned as part of the result rather than raised. Only one
    run may be in flight per instance.
    """

    def __init__(self, client: SuggestionInvoker, timeout: float | None = None):
        """Initialize orchestrator.

        Args:
            client: Model client used for the invoking stage
            timeout: Seconds to wait for the model before abandoning the run
        """
        self.client = client
        self.timeout = timeout
        self.stage = GenerationStage.IDLE
        self._in_flight = False

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate issue suggestions for a repository.

        Args:
            request: Repository URL and optional directives

        Returns:
            GenerationResult holding either suggestions or a failure

        Raises:
            RuntimeError: If another run is still in flight on this instance
        """
        if self._in_flight:
            raise RuntimeError("A generation is already in progress")

        self._in_flight = True
        try:
            return await self._run(request)
        finally:
            self._in_flight = False

    async def _run(self, request: GenerationRequest) -> GenerationResult:
        self.stage = GenerationStage.VALIDATING
        repository = locate(request.repository_url)
        if repository is None:
            return self._fail(
                InvalidInputError(f"Invalid GitHub URL: {request.repository_url!r}")
            )

        prompt = build_prompt(
            repository,
            request.repository_url,
            goals=request.goals,
            scan_todos=request.scan_todos,
        )

        self.stage = GenerationStage.INVOKING
        logger.info("Requesting suggestions for %s", repository.full_name)
        try:
            raw_text = await asyncio.wait_for(
                self.client.invoke(prompt), timeout=self.timeout
            )
        except TimeoutError:
            return self._fail(
                GenerationCancelledError(
                    f"Model did not respond within {self.timeout}s"
                ),
                repository=repository,
            )
        except GenerationError as e:
            return self._fail(e, repository=repository)

        self.stage = GenerationStage.EXTRACTING
        try:
            suggestions = extract_suggestions(raw_text)
        except ParseError as e:
            return self._fail(e, repository=repository)

        self.stage = GenerationStage.SUCCEEDED
        logger.info(
            "Generated %d suggestions for %s", len(suggestions), repository.full_name
        )
        return GenerationResult(
            repository=repository,
            suggestions=suggestions,
            stage=self.stage,
        )

    def _fail(
        self,
        error: GenerationError,
        repository: RepositoryIdentifier | None = None,
    ) -> GenerationResult:
        """Record a failed run and convert the error into a result."""
        failed_stage = self.stage
        if isinstance(error, GenerationCancelledError):
            self.stage = GenerationStage.CANCELLED
        else:
            self.stage = GenerationStage.FAILED

        logger.warning(
            "Generation failed during %s (%s): %s",
            failed_stage.value,
            error.category.value,
            error,
        )
        return GenerationResult(
            repository=repository,
            failure=GenerationFailure(
                category=error.category,
                message=error.user_message,
                stage=failed_stage,
            ),
            stage=self.stage,
        )
