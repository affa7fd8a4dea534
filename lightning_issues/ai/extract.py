"""Recover suggestion arrays from free-form model output."""

import json
import logging
import re

from pydantic import ValidationError

from ..errors import ParseError
from .models import SUGGESTION_LIST_ADAPTER, IssueSuggestion

logger = logging.getLogger(__name__)

# Opening fences may carry a language tag (```json); closing fences never do
CODE_FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_+-]*")


def isolate_json_array(raw_text: str) -> str:
    """Cut the candidate JSON array out of the model's text.

    Takes everything between the first ``[`` and the last ``]`` so prose the
    model wraps around the array is dropped, then removes any Markdown code
    fence markers that remain. If there is no such bracket pair the trimmed
    text is used as-is.
    """
    text = raw_text.strip()

    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end != -1 and start < end:
        text = text[start : end + 1]

    return CODE_FENCE_PATTERN.sub("", text)


def extract_suggestions(raw_text: str) -> list[IssueSuggestion]:
    """Extract validated issue suggestions from a model response.

    Validation is strict: every element must carry a non-empty ``title``,
    ``body`` and ``reasoning`` and a known ``type``. Extra keys are ignored.

    Args:
        raw_text: Text returned by the model

    Returns:
        Suggestions in the order the model listed them

    Raises:
        ParseError: If the text holds no decodable, valid suggestion array
    """
    candidate = isolate_json_array(raw_text)

    # Besides JSONDecodeError, oversized integers raise a plain ValueError and
    # deep nesting raises RecursionError
    try:
        decoded = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        logger.error("JSON parse error: %s. Raw text: %r", e, raw_text)
        raise ParseError(f"Response is not valid JSON: {e}", raw_text=raw_text) from e

    if not isinstance(decoded, list):
        logger.error("Expected a JSON array, got %s", type(decoded).__name__)
        raise ParseError(
            f"Expected a JSON array, got {type(decoded).__name__}", raw_text=raw_text
        )

    try:
        return SUGGESTION_LIST_ADAPTER.validate_python(decoded)
    except ValidationError as e:
        logger.error("Suggestion validation failed: %s. Raw text: %r", e, raw_text)
        raise ParseError(
            f"Response does not match the suggestion schema: {e}", raw_text=raw_text
        ) from e
