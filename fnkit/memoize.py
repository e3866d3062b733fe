"""Memoize decorator implementation."""

import functools
import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from .entry import Entry
from .exceptions import SerializationError
from .stores import MemoryStore, Store

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def memoize(
    fn: Callable[[T], R] | None = None,
    *,
    store: Store | None = None,
    key: Callable[[T], str] | None = None,
) -> Callable[[T], R] | Callable[[Callable[[T], R]], Callable[[T], R]]:
    """Cache the results of a single-argument function.

    Args:
        fn: The function to memoize. Omit it to get a configured decorator.
        store: Storage backend (defaults to a fresh MemoryStore per wrapper)
        key: Custom key generation function, called with the argument

    There is no eviction. The cache lives as long as the wrapper (or the
    store, if one is shared) and grows with every distinct argument.

    Example:
        @memoize
        def fib(n):
            return n if n <= 1 else fib(n - 1) + fib(n - 2)

        @memoize(store=RedisStore(client))
        def lookup(user_id):
            return fetch_profile(user_id)
    """

    def decorator(func: Callable[[T], R]) -> Callable[[T], R]:
        _store = store if store is not None else MemoryStore()
        # Re-entrant so recursive memoized functions can call themselves
        lock = threading.RLock()

        @functools.wraps(func)
        def wrapper(arg: T) -> R:
            cache_key = key(arg) if key else _store.make_key(func, arg)

            with lock:
                existing = _store.get(cache_key)
                if existing is not None:
                    return existing.value  # type: ignore[return-value]

                result = func(arg)

                try:
                    _store.set(Entry(key=cache_key, value=result))
                except SerializationError as e:
                    logger.warning(
                        "Result of %s not cached for key %r: %s",
                        getattr(func, "__qualname__", repr(func)),
                        cache_key,
                        e.reason,
                    )
                else:
                    logger.debug("Cached result for key %r", cache_key)

                return result

        return wrapper

    if fn is not None:
        return decorator(fn)
    return decorator
