"""Local persistence for generation history."""

from .backend import FileBackend, KeyValueBackend, MemoryBackend
from .history import HISTORY_KEY, HistoryEntry, HistoryStore

__all__ = [
    "HistoryStore",
    "HistoryEntry",
    "HISTORY_KEY",
    "KeyValueBackend",
    "FileBackend",
    "MemoryBackend",
]
