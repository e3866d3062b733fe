"""File-based store implementation."""

import hashlib
import json
from collections.abc import Hashable
from pathlib import Path

from ..entry import Entry
from ..exceptions import SerializationError
from .base import Store


class FileStore(Store):
    """File-based store for memoized results.

    Uses one JSON file per key, named by the key's SHA-256 digest. Writes
    go through a temp file and an atomic rename, so concurrent processes
    never see a partial file.

    Args:
        directory: Path to directory for storing entries
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _entry_path(self, key: Hashable) -> Path:
        """Get file path for an entry.

        The name is the SHA-256 digest of the key, so distinct keys never
        share a file whatever characters they contain.
        """
        digest = hashlib.sha256(str(key).encode()).hexdigest()
        return self.directory / f"{digest}.json"

    def get(self, key: Hashable) -> Entry | None:
        """Retrieve an entry."""
        entry_path = self._entry_path(key)

        if not entry_path.exists():
            return None

        try:
            with open(entry_path) as f:
                data = json.load(f)
            return Entry.from_dict(data)
        except (json.JSONDecodeError, KeyError, FileNotFoundError):
            return None

    def set(self, entry: Entry) -> None:
        """Store an entry."""
        entry_path = self._entry_path(entry.key)

        try:
            payload = json.dumps(entry.to_dict(), indent=2)
        except (TypeError, ValueError) as e:
            raise SerializationError(entry.value, str(e)) from e

        # Write atomically using temp file + rename
        temp_path = entry_path.with_suffix(".tmp")
        with open(temp_path, "w") as f:
            f.write(payload)

        temp_path.replace(entry_path)

    def delete(self, key: Hashable) -> None:
        """Delete an entry."""
        self._entry_path(key).unlink(missing_ok=True)

    def clear(self) -> None:
        """Clear all entries (useful for testing)."""
        for path in self.directory.glob("*.json"):
            path.unlink(missing_ok=True)
