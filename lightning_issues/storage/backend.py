"""Key-value backends for durable local state."""

import os
import tempfile
from pathlib import Path
from typing import Protocol


class KeyValueBackend(Protocol):
    """Durable text storage addressed by key."""

    def read(self, key: str) -> str | None:
        """Return the stored text, or None if nothing is stored."""
        ...

    def write(self, key: str, value: str) -> None:
        """Replace the stored text for a key."""
        ...


class FileBackend:
    """Stores each key as a JSON file in a directory."""

    def __init__(self, base_path: str | Path = "data"):
        """Initialize file backend.

        Args:
            base_path: Directory holding one ``<key>.json`` file per key
        """
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        """Get full file path for a key."""
        return self.base_path / f"{key}.json"

    def read(self, key: str) -> str | None:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return None
        return file_path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Write the full value atomically.

        The text goes to a temporary file in the same directory which then
        replaces the target, so readers never see a half-written snapshot.
        """
        file_path = self._get_file_path(key)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.base_path, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class MemoryBackend:
    """In-process backend, handy for tests and dry runs."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self.values.get(key)

    def write(self, key: str, value: str) -> None:
        self.values[key] = value
