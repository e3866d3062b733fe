"""Invocation-count gates: once, before and after."""

import functools
import threading
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def once(fn: Callable[[], T]) -> Callable[[], T]:
    """Invoke ``fn`` on the first call only and replay its result afterwards.

    Concurrent first calls are serialized, so ``fn`` never runs twice. If
    ``fn`` raises, nothing is cached and the next call tries again.

    Example:
        @once
        def load_settings():
            return read_settings_file()
    """
    done = False
    result: T | None = None
    lock = threading.Lock()

    @functools.wraps(fn)
    def wrapper() -> T:
        nonlocal done, result
        with lock:
            if not done:
                result = fn()
                done = True
            return result  # type: ignore[return-value]

    return wrapper


def before(n: int, fn: Callable[[], T]) -> Callable[[], T | None]:
    """Invoke ``fn`` for the first ``n`` calls, then replay the last result.

    With ``n <= 0`` ``fn`` is never invoked and every call returns None.
    """
    count = 0
    result: T | None = None
    lock = threading.Lock()

    @functools.wraps(fn)
    def wrapper() -> T | None:
        nonlocal count, result
        with lock:
            if count < n:
                result = fn()
                count += 1
            return result

    return wrapper


def after(n: int, fn: Callable[[], T]) -> Callable[[], T | None]:
    """Ignore the first ``n - 1`` calls, then invoke ``fn`` on every call.

    Ignored calls return None. Handy for running a completion step once a
    known number of collaborators have reported in.

    Example:
        finish = after(len(jobs), report_done)
        for job in jobs:
            job.on_complete(finish)
    """
    count = 0
    lock = threading.Lock()

    @functools.wraps(fn)
    def wrapper() -> T | None:
        nonlocal count
        with lock:
            count += 1
            if count < n:
                return None
            return fn()

    return wrapper
