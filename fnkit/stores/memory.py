"""In-memory store implementation."""

import threading
from collections.abc import Callable, Hashable

from ..entry import Entry
from .base import Store


class MemoryStore(Store):
    """Thread-safe in-memory store keyed by the call argument itself.

    Grows without bound for as long as it is referenced.

    Note: This store does NOT persist across processes or restarts.
    Use FileStore or RedisStore for multi-process scenarios.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, Entry] = {}
        self._lock = threading.Lock()

    def make_key(self, func: Callable, arg: object) -> Hashable:
        """Use the argument as its own key.

        Raises:
            TypeError: If the argument is not hashable
        """
        hash(arg)
        return arg

    def get(self, key: Hashable) -> Entry | None:
        """Retrieve an entry."""
        with self._lock:
            return self._entries.get(key)

    def set(self, entry: Entry) -> None:
        """Store an entry."""
        with self._lock:
            self._entries[entry.key] = entry

    def delete(self, key: Hashable) -> None:
        """Delete an entry."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Clear all entries (useful for testing)."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
