"""Exception hierarchy for the suggestion generation pipeline."""

from enum import Enum


class ErrorCategory(str, Enum):
    """User-facing classification of a failed generation."""

    INVALID_INPUT = "invalid_input"
    UPSTREAM = "upstream"
    INACCESSIBLE_REPOSITORY = "inaccessible_repository"
    EMPTY_RESPONSE = "empty_response"
    PARSE = "parse"
    CANCELLED = "cancelled"


class GenerationError(Exception):
    """Base class for pipeline failures.

    ``user_message`` is safe to show to the end user; diagnostic detail
    belongs in the exception chain and the log.
    """

    category = ErrorCategory.UPSTREAM
    default_message = "Something went wrong while analyzing the repository."

    def __init__(self, detail: str | None = None, user_message: str | None = None):
        super().__init__(detail or self.default_message)
        self.user_message = user_message or self.default_message


class InvalidInputError(GenerationError):
    """The URL is malformed or does not point at a github.com repository."""

    category = ErrorCategory.INVALID_INPUT
    default_message = "Please enter a valid GitHub repository URL."


class UpstreamError(GenerationError):
    """The model call failed at the transport or service level."""

    category = ErrorCategory.UPSTREAM
    default_message = "Failed to generate suggestions. Please try again later."


class InaccessibleRepositoryError(UpstreamError):
    """The model service rejected the request as a bad request."""

    category = ErrorCategory.INACCESSIBLE_REPOSITORY
    default_message = (
        "AI request failed. The repository might be private or inaccessible."
    )


class EmptyResponseError(UpstreamError):
    """The model answered without any text."""

    category = ErrorCategory.EMPTY_RESPONSE
    default_message = "No data received from AI."


class ParseError(GenerationError):
    """The model answered but its text held no valid suggestion array."""

    category = ErrorCategory.PARSE
    default_message = "Failed to parse AI response. Please try again."

    def __init__(self, detail: str | None = None, raw_text: str = ""):
        super().__init__(detail)
        self.raw_text = raw_text


class GenerationCancelledError(GenerationError):
    """The model call was abandoned before it produced a response."""

    category = ErrorCategory.CANCELLED
    default_message = "Generation was cancelled because the AI took too long."


class PersistenceWarning(Exception):
    """Stored history could not be decoded.

    Raised inside the history store and recovered there; it never reaches
    callers of ``HistoryStore.load``.
    """
