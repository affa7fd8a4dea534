"""Parse user-supplied GitHub URLs into repository identifiers."""

import logging
from urllib.parse import urlsplit

from .models import GITHUB_HOST, RepositoryIdentifier

logger = logging.getLogger(__name__)


def locate(url: str) -> RepositoryIdentifier | None:
    """Parse a GitHub repository URL.

    Only the URL syntax is checked. The host must be exactly ``github.com``
    and the path must hold at least two non-empty segments; anything after
    ``/owner/name`` (``/tree/main``, ``/issues`` ...) is ignored.

    Args:
        url: URL entered by the user

    Returns:
        RepositoryIdentifier, or None if the URL is malformed or not a
        github.com repository URL
    """
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        logger.debug("Unparseable repository URL: %r", url)
        return None

    if not parts.scheme or not hostname:
        return None

    if hostname != GITHUB_HOST:
        return None

    segments = [segment for segment in parts.path.split("/") if segment]
    if len(segments) < 2:
        return None

    return RepositoryIdentifier(owner=segments[0], name=segments[1])
