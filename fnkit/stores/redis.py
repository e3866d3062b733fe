"""Redis-based store implementation."""

import json
from collections.abc import Hashable
from typing import TYPE_CHECKING

from ..entry import Entry
from ..exceptions import SerializationError
from .base import Store

if TYPE_CHECKING:
    from redis import Redis


class RedisStore(Store):
    """Redis-based store for memoized results.

    Shares results across processes and servers. Keys never expire.

    Args:
        client: Redis client instance
        prefix: Key prefix for namespacing (default: "fnkit:memo:")
    """

    def __init__(self, client: "Redis", prefix: str = "fnkit:memo:") -> None:
        self.client = client
        self.prefix = prefix

    def _key(self, key: Hashable) -> str:
        """Add prefix to key."""
        return f"{self.prefix}{key}"

    def get(self, key: Hashable) -> Entry | None:
        """Retrieve an entry from Redis."""
        data = self.client.get(self._key(key))
        if data is None:
            return None

        try:
            return Entry.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError):
            return None

    def set(self, entry: Entry) -> None:
        """Store an entry in Redis."""
        try:
            data = json.dumps(entry.to_dict())
        except (TypeError, ValueError) as e:
            raise SerializationError(entry.value, str(e)) from e

        self.client.set(self._key(entry.key), data)

    def delete(self, key: Hashable) -> None:
        """Delete an entry from Redis."""
        self.client.delete(self._key(key))

    def clear(self) -> None:
        """Clear all entries with this prefix (useful for testing)."""
        pattern = f"{self.prefix}*"
        cursor = 0

        while True:
            cursor, keys = self.client.scan(cursor, match=pattern, count=100)
            if keys:
                self.client.delete(*keys)
            if cursor == 0:
                break
