"""fnkit - Function-control primitives for Python.

Debounce, throttle, once/before/after gates, memoization, retry,
composition helpers and bulk transforms, all thread-safe.

Example:
    @memoize
    def fib(n):
        return n if n <= 1 else fib(n - 1) + fib(n - 2)

    save = debounce(flush_to_disk, 0.5)
    squares = transform_concurrent(range(1000), lambda x: x * x, 4)
"""

import logging

from .compose import compose, curry, negate, partial, pipe, rearg, spread, wrap
from .exceptions import FnkitError, SerializationError
from .gates import after, before, once
from .memoize import memoize
from .retry import retry
from .stores import MemoryStore, Store
from .timing import debounce, delay, throttle
from .transform import (
    transform_batch,
    transform_concurrent,
    transform_list,
    transform_list_with_error,
    transform_map,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "debounce",
    "throttle",
    "delay",
    "once",
    "before",
    "after",
    "memoize",
    "retry",
    "compose",
    "pipe",
    "negate",
    "wrap",
    "partial",
    "rearg",
    "spread",
    "curry",
    "transform_list",
    "transform_map",
    "transform_list_with_error",
    "transform_concurrent",
    "transform_batch",
    "FnkitError",
    "SerializationError",
    "Store",
    "MemoryStore",
]
