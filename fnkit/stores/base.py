"""Base store interface for memoized results."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable

from ..entry import Entry
from ..key import generate_key


class Store(ABC):
    """Abstract base class for memoize stores.

    Stores are responsible for:
    - Deriving a cache key from a call
    - Persisting entries
    - Looking entries up again

    Stores never evict on their own. Locking is done by the memoized
    wrapper, not by the store.
    """

    def make_key(self, func: Callable, arg: object) -> Hashable:
        """Derive the cache key for ``func(arg)``.

        Persistent stores need a string, so the default builds one from the
        function name and a normalized form of the argument.
        """
        return generate_key(func, arg)

    @abstractmethod
    def get(self, key: Hashable) -> Entry | None:
        """Retrieve an entry by key.

        Args:
            key: The cache key

        Returns:
            Entry if found, None otherwise
        """
        pass

    @abstractmethod
    def set(self, entry: Entry) -> None:
        """Store an entry.

        Args:
            entry: The entry to store

        Raises:
            SerializationError: If the store cannot encode the value
        """
        pass

    @abstractmethod
    def delete(self, key: Hashable) -> None:
        """Delete an entry.

        Args:
            key: The cache key
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry held by this store."""
        pass
