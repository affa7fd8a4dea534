"""Durable history of successful generations."""

import json
import logging
import time
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..ai.models import IssueSuggestion
from ..errors import PersistenceWarning
from ..generation.models import GenerationRequest, GenerationResult
from ..github_client.models import RepositoryIdentifier
from .backend import KeyValueBackend

logger = logging.getLogger(__name__)

HISTORY_KEY = "lightning_issues_history"
HISTORY_FORMAT_VERSION = 1


def _now_millis() -> int:
    return int(time.time() * 1000)


def _new_entry_id() -> str:
    return uuid.uuid4().hex


class HistoryEntry(BaseModel):
    """One successful generation, immutable once recorded."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_entry_id, description="Unique entry id")
    timestamp: int = Field(
        default_factory=_now_millis, description="Creation time in epoch millis"
    )
    repository: RepositoryIdentifier
    repository_url: str = Field(description="Repository URL as entered")
    suggestions: list[IssueSuggestion]
    goals: str | None = None


class HistoryDocument(BaseModel):
    """Versioned on-disk layout of the history log."""

    version: int = HISTORY_FORMAT_VERSION
    entries: list[HistoryEntry] = Field(default_factory=list)


class HistoryStore:
    """Newest-first log of generations persisted under a single key.

    Every mutation rewrites the whole log, so the last writer wins if two
    processes share the same backend.
    """

    def __init__(self, backend: KeyValueBackend, key: str = HISTORY_KEY):
        """Initialize history store.

        The store starts empty; call ``load`` (or use ``open``) to read the
        persisted log.

        Args:
            backend: Durable key-value storage
            key: Key the log is stored under
        """
        self.backend = backend
        self.key = key
        self._entries: list[HistoryEntry] = []

    @classmethod
    def open(cls, backend: KeyValueBackend, key: str = HISTORY_KEY) -> "HistoryStore":
        """Create a store and load its persisted log."""
        store = cls(backend, key)
        store.load()
        return store

    @property
    def entries(self) -> list[HistoryEntry]:
        """Current log, newest first."""
        return list(self._entries)

    def load(self) -> list[HistoryEntry]:
        """Read the persisted log.

        Missing data yields an empty log. Unreadable data also yields an
        empty log; the problem is logged rather than raised so stale data
        never blocks startup.

        Returns:
            Loaded log, newest first
        """
        try:
            raw = self.backend.read(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read history under %r: %s", self.key, e)
            raw = None

        if raw is None:
            self._entries = []
            return self.entries

        try:
            self._entries = self._decode(raw)
        except PersistenceWarning as e:
            logger.warning("Discarding unreadable history under %r: %s", self.key, e)
            self._entries = []

        return self.entries

    def add(self, entry: HistoryEntry) -> list[HistoryEntry]:
        """Prepend an entry and persist the log.

        Raises:
            OSError: If the snapshot cannot be written; the log is unchanged
        """
        entries = [entry, *self._entries]
        self._save(entries)
        self._entries = entries
        return self.entries

    def delete(self, entry_id: str) -> list[HistoryEntry]:
        """Remove the entry with the given id and persist the log.

        Deleting an unknown id leaves the log unchanged.
        """
        entries = [entry for entry in self._entries if entry.id != entry_id]
        self._save(entries)
        self._entries = entries
        return self.entries

    def clear(self) -> list[HistoryEntry]:
        """Remove every entry and persist the empty log.

        Callers are responsible for confirming this with the user first.
        """
        self._save([])
        self._entries = []
        return self.entries

    def get(self, entry_id: str) -> HistoryEntry | None:
        """Look up an entry by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def record(
        self, request: GenerationRequest, result: GenerationResult
    ) -> HistoryEntry:
        """Create and add the entry for a successful generation.

        Args:
            request: Request that produced the result
            result: Successful generation result

        Returns:
            The newly added entry

        Raises:
            ValueError: If the result is a failure
        """
        if not result.succeeded or result.repository is None:
            raise ValueError("Only successful generations can be recorded")

        goals = request.goals if request.goals and request.goals.strip() else None
        entry = HistoryEntry(
            repository=result.repository,
            repository_url=request.repository_url,
            suggestions=result.suggestions,
            goals=goals,
        )
        self.add(entry)
        return entry

    def _save(self, entries: list[HistoryEntry]) -> None:
        """Write a snapshot of the given log."""
        document = HistoryDocument(entries=entries)
        self.backend.write(
            self.key,
            json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False),
        )

    def _decode(self, raw: str) -> list[HistoryEntry]:
        """Decode stored text, raising PersistenceWarning if it is unusable."""
        try:
            data: Any = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise PersistenceWarning(f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise PersistenceWarning(f"unexpected {type(data).__name__} document")

        version = data.get("version")
        if version != HISTORY_FORMAT_VERSION:
            raise PersistenceWarning(f"unsupported history version {version!r}")

        try:
            return HistoryDocument.model_validate(data).entries
        except ValidationError as e:
            raise PersistenceWarning(f"invalid history entries: {e}") from e
