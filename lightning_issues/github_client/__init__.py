"""GitHub URL parsing and deep-link helpers."""

from .models import RepositoryIdentifier
from .locator import locate
from .links import LABEL_BY_TYPE, build_new_issue_url

__all__ = [
    "RepositoryIdentifier",
    "locate",
    "build_new_issue_url",
    "LABEL_BY_TYPE",
]
