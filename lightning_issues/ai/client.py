"""Model invocation for issue suggestions."""

import asyncio
import logging
from typing import Any, Protocol

from pydantic_ai import Agent
from pydantic_ai.builtin_tools import WebSearchTool
from pydantic_ai.exceptions import ModelHTTPError

from ..errors import EmptyResponseError, InaccessibleRepositoryError, UpstreamError
from .config import DEFAULT_MODEL

logger = logging.getLogger(__name__)

BAD_REQUEST_STATUS = 400


class SuggestionInvoker(Protocol):
    """Anything that turns a prompt into raw model text."""

    async def invoke(self, prompt: str) -> str: ...


def create_suggestion_agent() -> Agent[None, str]:
    """Create the plain-text agent with web search enabled.

    The model is chosen per run so the agent can be built without
    credentials being present.
    """
    return Agent(
        output_type=str,
        builtin_tools=[WebSearchTool()],
    )


def _is_bad_request(error: Exception) -> bool:
    """Check whether a transport failure is a 400 Bad Request."""
    if isinstance(error, ModelHTTPError):
        return error.status_code == BAD_REQUEST_STATUS
    return str(BAD_REQUEST_STATUS) in str(error)


class SuggestionClient:
    """Single-attempt model client.

    This is the only place that talks to the model service; everything
    downstream works on the returned text.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        agent: Any = None,
        model_settings: dict[str, Any] | None = None,
    ):
        """Initialize client.

        Args:
            model: Model identifier (e.g., 'google-gla:gemini-2.5-flash')
            agent: Pre-built agent; a web-search agent is created lazily if None
            model_settings: Extra settings passed through to the model
        """
        self.model = model
        self.model_settings = model_settings
        self._agent = agent

    @property
    def agent(self) -> Any:
        """Lazy-loaded suggestion agent."""
        if self._agent is None:
            self._agent = create_suggestion_agent()
        return self._agent

    async def invoke(self, prompt: str) -> str:
        """Send the prompt to the model and return its raw text.

        Args:
            prompt: Fully built suggestion prompt

        Returns:
            Non-empty model text

        Raises:
            InaccessibleRepositoryError: If the service answered 400 Bad Request
            UpstreamError: For any other transport or service failure
            EmptyResponseError: If the model returned no text
        """
        try:
            result = await self.agent.run(
                prompt, model=self.model, model_settings=self.model_settings
            )
        except Exception as e:
            logger.error("Model request to %s failed: %s", self.model, e)
            if _is_bad_request(e):
                raise InaccessibleRepositoryError(str(e)) from e
            raise UpstreamError(str(e)) from e

        text = result.output
        if not text or not text.strip():
            logger.error("Model %s returned an empty response", self.model)
            raise EmptyResponseError("No data received from AI")

        logger.debug("Model %s returned %d characters", self.model, len(text))
        return text


class RetryingSuggestionClient:
    """Bounded retry with exponential backoff around another client.

    Bad requests are not retried since they point at the repository rather
    than a transient fault.
    """

    def __init__(
        self,
        client: SuggestionInvoker,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.client = client
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds

    async def invoke(self, prompt: str) -> str:
        """Invoke the wrapped client, retrying transient upstream failures."""
        attempt = 1
        while True:
            try:
                return await self.client.invoke(prompt)
            except InaccessibleRepositoryError:
                raise
            except UpstreamError as e:
                if attempt >= self.max_attempts:
                    raise
                delay = self.backoff_seconds * 2 ** (attempt - 1)
                logger.warning(
                    "Attempt %d/%d failed (%s), retrying in %.1fs",
                    attempt,
                    self.max_attempts,
                    e,
                    delay,
                )
                await asyncio.sleep(delay)
                attempt += 1
