"""Tests for the generation history store."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from lightning_issues.ai.models import IssueSuggestion
from lightning_issues.errors import ErrorCategory
from lightning_issues.generation.models import (
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationStage,
)
from lightning_issues.github_client.models import RepositoryIdentifier
from lightning_issues.storage.backend import FileBackend, MemoryBackend
from lightning_issues.storage.history import (
    HISTORY_KEY,
    HistoryEntry,
    HistoryStore,
)


@pytest.fixture
def make_entry(
    repository: RepositoryIdentifier, sample_suggestions: list[IssueSuggestion]
):
    """Factory for history entries."""

    def _make(entry_id: str, timestamp: int = 1_700_000_000_000) -> HistoryEntry:
        return HistoryEntry(
            id=entry_id,
            timestamp=timestamp,
            repository=repository,
            repository_url=repository.url,
            suggestions=sample_suggestions,
            goals=None,
        )

    return _make


class TestHistoryStore:
    """Test HistoryStore mutations and persistence."""

    def test_load_missing_is_empty(self) -> None:
        """Test a fresh backend yields an empty log."""
        assert HistoryStore(MemoryBackend()).load() == []

    def test_add_prepends_and_persists(self, temp_data_dir: Path, make_entry) -> None:
        """Test add keeps newest first and survives a restart."""
        store = HistoryStore.open(FileBackend(temp_data_dir))
        store.add(make_entry("first"))
        log = store.add(make_entry("second"))

        assert [e.id for e in log] == ["second", "first"]

        reloaded = HistoryStore(FileBackend(temp_data_dir)).load()
        assert [e.id for e in reloaded] == ["second", "first"]
        assert reloaded[0] == make_entry("second")

    def test_delete_keeps_relative_order(self, make_entry) -> None:
        """Test delete removes exactly one entry."""
        backend = MemoryBackend()
        store = HistoryStore(backend)
        for entry_id in ("a", "b", "c", "d"):
            store.add(make_entry(entry_id))

        log = store.delete("b")

        assert [e.id for e in log] == ["d", "c", "a"]
        assert [e.id for e in HistoryStore.open(backend).entries] == ["d", "c", "a"]

    def test_delete_unknown_id_is_noop(self, make_entry) -> None:
        """Test deleting a missing id does not fail."""
        store = HistoryStore(MemoryBackend())
        store.add(make_entry("a"))

        assert [e.id for e in store.delete("zzz")] == ["a"]

    def test_clear(self, temp_data_dir: Path, make_entry) -> None:
        """Test clear empties the persisted log."""
        store = HistoryStore(FileBackend(temp_data_dir))
        store.add(make_entry("a"))
        store.add(make_entry("b"))

        assert store.clear() == []
        assert HistoryStore.open(FileBackend(temp_data_dir)).entries == []

    def test_get(self, make_entry) -> None:
        """Test lookup by id."""
        store = HistoryStore(MemoryBackend())
        store.add(make_entry("a"))

        assert store.get("a") == make_entry("a")
        assert store.get("b") is None

    def test_entries_is_a_copy(self, make_entry) -> None:
        """Test callers cannot mutate the log behind the store's back."""
        store = HistoryStore(MemoryBackend())
        store.add(make_entry("a"))

        store.entries.clear()

        assert len(store.entries) == 1

    def test_snapshot_is_versioned(self, make_entry) -> None:
        """Test the stored document carries a version tag."""
        backend = MemoryBackend()
        HistoryStore(backend).add(make_entry("a"))

        document = json.loads(backend.values[HISTORY_KEY])
        assert document["version"] == 1
        assert document["entries"][0]["id"] == "a"
        assert document["entries"][0]["repository"] == {
            "owner": "octocat",
            "name": "Hello-World",
        }
        assert document["entries"][0]["suggestions"][0]["type"] == "Bug"

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            '"a string"',
            '{"version": 99, "entries": []}',
            '{"version": 1, "entries": [{"id": "x"}]}',
            '[{"id": "x", "timestamp": "yesterday"}]',
            "[" * 100_000 + "]" * 100_000,
            '{"version": 1, "entries": [' + "1" * 5000 + "]}",
        ],
        ids=[
            "invalid-json",
            "string",
            "future-version",
            "invalid-entry",
            "bare-list",
            "deeply-nested",
            "oversized-integer",
        ],
    )
    def test_corrupt_data_recovers_empty(
        self, raw: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test unreadable history falls back to empty and is logged."""
        store = HistoryStore(MemoryBackend({HISTORY_KEY: raw}))

        with caplog.at_level(logging.WARNING):
            assert store.load() == []

        assert "Discarding unreadable history" in caplog.text

    def test_undecodable_file_recovers_empty(self, temp_data_dir: Path) -> None:
        """Test binary garbage on disk does not crash loading."""
        (temp_data_dir / f"{HISTORY_KEY}.json").write_bytes(b"\xff\xfe\x00garbage")

        assert HistoryStore(FileBackend(temp_data_dir)).load() == []

    @pytest.mark.parametrize("operation", ["add", "delete", "clear"])
    def test_failed_write_leaves_log_unchanged(
        self, make_entry, operation: str
    ) -> None:
        """Test a write error keeps memory in step with the stored snapshot."""
        backend = MemoryBackend()
        store = HistoryStore(backend)
        store.add(make_entry("a"))
        snapshot = backend.values[HISTORY_KEY]

        with patch.object(backend, "write", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                if operation == "add":
                    store.add(make_entry("b"))
                elif operation == "delete":
                    store.delete("a")
                else:
                    store.clear()

        assert [e.id for e in store.entries] == ["a"]
        assert backend.values[HISTORY_KEY] == snapshot

    def test_custom_key(self, make_entry) -> None:
        """Test stores under different keys are independent."""
        backend = MemoryBackend()
        HistoryStore(backend, key="other").add(make_entry("a"))

        assert HistoryStore.open(backend).entries == []
        assert len(HistoryStore.open(backend, key="other").entries) == 1


class TestRecord:
    """Test recording generation results."""

    def test_record_successful_result(
        self,
        repository: RepositoryIdentifier,
        sample_suggestions: list[IssueSuggestion],
    ) -> None:
        """Test a successful run becomes the newest entry."""
        store = HistoryStore(MemoryBackend())
        request = GenerationRequest(
            repository_url="https://github.com/octocat/Hello-World/tree/main",
            goals="Better docs",
        )
        result = GenerationResult(repository=repository, suggestions=sample_suggestions)

        entry = store.record(request, result)

        assert store.entries == [entry]
        assert entry.repository == repository
        assert entry.repository_url == request.repository_url
        assert entry.suggestions == sample_suggestions
        assert entry.goals == "Better docs"
        assert len(entry.id) == 32
        assert entry.timestamp > 1_600_000_000_000

    def test_blank_goals_stored_as_none(
        self,
        repository: RepositoryIdentifier,
        sample_suggestions: list[IssueSuggestion],
    ) -> None:
        """Test blank goals are not kept."""
        store = HistoryStore(MemoryBackend())
        entry = store.record(
            GenerationRequest(repository_url=repository.url, goals="  "),
            GenerationResult(repository=repository, suggestions=sample_suggestions),
        )

        assert entry.goals is None

    def test_ids_are_unique(
        self,
        repository: RepositoryIdentifier,
        sample_suggestions: list[IssueSuggestion],
    ) -> None:
        """Test back-to-back records get distinct ids."""
        store = HistoryStore(MemoryBackend())
        request = GenerationRequest(repository_url=repository.url)
        result = GenerationResult(repository=repository, suggestions=sample_suggestions)

        first = store.record(request, result)
        second = store.record(request, result)

        assert first.id != second.id

    def test_failed_result_rejected(self, repository: RepositoryIdentifier) -> None:
        """Test failures never enter the history."""
        store = HistoryStore(MemoryBackend())
        result = GenerationResult(
            repository=repository,
            failure=GenerationFailure(
                category=ErrorCategory.PARSE,
                message="Failed to parse AI response. Please try again.",
                stage=GenerationStage.EXTRACTING,
            ),
            stage=GenerationStage.FAILED,
        )

        with pytest.raises(ValueError):
            store.record(GenerationRequest(repository_url=repository.url), result)

        assert store.entries == []
