"""Pydantic models for GitHub repository references."""

from pydantic import BaseModel, ConfigDict, Field

GITHUB_HOST = "github.com"


class RepositoryIdentifier(BaseModel):
    """Owner/name pair uniquely addressing a GitHub repository.

    Identifiers are derived purely from URL syntax; nothing guarantees the
    repository actually exists.
    """

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner (user or org)")
    name: str = Field(..., min_length=1, description="Repository name")

    @property
    def full_name(self) -> str:
        """Return the ``owner/name`` form used by GitHub search."""
        return f"{self.owner}/{self.name}"

    @property
    def url(self) -> str:
        """Return the canonical repository URL."""
        return f"https://{GITHUB_HOST}/{self.full_name}"

    def __str__(self) -> str:
        return self.full_name
