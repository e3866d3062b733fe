"""Fixed-delay retry wrapper."""

import functools
import logging
import time
from collections.abc import Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def retry(fn: Callable[[], T], max_retries: int, delay: float) -> Callable[[], T]:
    """Re-invoke ``fn`` until it succeeds or the retries run out.

    Args:
        fn: Zero-argument callable that may raise
        max_retries: Additional attempts after the first (negative means 0)
        delay: Seconds to sleep between attempts; fixed, not exponential

    Returns:
        A zero-argument callable returning the first successful result.
        If every attempt raises, the last exception is re-raised and the
        earlier ones are dropped.

    Example:
        fetch = retry(lambda: client.get("/health"), max_retries=3, delay=0.5)
        response = fetch()
    """
    attempts = max(max_retries, 0) + 1

    @functools.wraps(fn)
    def wrapper() -> T:
        attempt = 1
        while True:
            try:
                return fn()
            except Exception as e:
                logger.warning(
                    "Attempt %d/%d of %s failed: %s",
                    attempt,
                    attempts,
                    getattr(fn, "__qualname__", repr(fn)),
                    e,
                )
                if attempt >= attempts:
                    raise
            attempt += 1
            time.sleep(delay)

    return wrapper
