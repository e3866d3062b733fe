"""Apply a function across a collection.

``transform_list`` and ``transform_batch`` run in the calling thread.
``transform_concurrent`` forks a fresh thread pool per call and joins it
before returning. Every variant returns results in input order.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from .utils import chunk_bounds

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")
R = TypeVar("R")

DEFAULT_BATCH_SIZE = 100


def transform_list(items: Sequence[T], fn: Callable[[T], R]) -> list[R]:
    """Apply ``fn`` to every item, in order.

    Example:
        >>> transform_list([1, 2, 3], lambda x: x * x)
        [1, 4, 9]
    """
    return [fn(item) for item in items]


def transform_map(mapping: Mapping[K, T], fn: Callable[[T], R]) -> dict[K, R]:
    """Apply ``fn`` to every value, keeping the keys.

    Example:
        >>> transform_map({"John": 30, "Jane": 25}, lambda age: age * 2)
        {'John': 60, 'Jane': 50}
    """
    return {k: fn(v) for k, v in mapping.items()}


def transform_list_with_error(
    items: Sequence[T], fn: Callable[[T], R]
) -> tuple[list[R], list[Exception]]:
    """Apply a fallible ``fn`` to every item and collect what it raises.

    Args:
        items: Items to transform
        fn: Transformer that may raise

    Returns:
        ``(results, errors)``. Items whose transform raised are left out of
        ``results``; their exceptions are in ``errors``, in the order they
        were raised. The two lists are not index aligned.

    Example:
        >>> results, errors = transform_list_with_error(["1", "x", "3"], int)
        >>> results, len(errors)
        ([1, 3], 1)
    """
    results: list[R] = []
    errors: list[Exception] = []

    for item in items:
        try:
            results.append(fn(item))
        except Exception as e:
            errors.append(e)

    return results, errors


def transform_concurrent(
    items: Sequence[T], fn: Callable[[T], R], num_workers: int
) -> list[R]:
    """Apply ``fn`` to every item across ``num_workers`` threads.

    Items are split into contiguous chunks of ``ceil(len(items) /
    num_workers)`` and each chunk is handled by one worker, which writes its
    results into the slots matching the input positions. The call blocks
    until every worker has finished, so output order always equals input
    order.

    Falls back to ``transform_list`` when ``num_workers <= 1`` or there are
    fewer items than workers.

    Raises:
        Exception: Whatever ``fn`` raised first, by chunk order. It is
            re-raised only after every worker has finished.

    Example:
        >>> transform_concurrent([1, 2, 3, 4, 5], lambda x: x * x, 2)
        [1, 4, 9, 16, 25]
    """
    if not items:
        return []

    if num_workers <= 1 or len(items) < num_workers:
        return transform_list(items, fn)

    results: list[R | None] = [None] * len(items)

    def work(start: int, end: int) -> None:
        for i in range(start, end):
            results[i] = fn(items[i])

    bounds = chunk_bounds(len(items), num_workers)
    logger.debug("Transforming %d items on %d workers", len(items), len(bounds))

    with ThreadPoolExecutor(max_workers=len(bounds)) as executor:
        futures = [executor.submit(work, start, end) for start, end in bounds]

    # The executor has joined; surface the first failure, if any
    for future in futures:
        future.result()

    return results  # type: ignore[return-value]


def transform_batch(
    items: Sequence[T],
    fn: Callable[[Sequence[T]], Sequence[R]],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[R]:
    """Hand ``items`` to ``fn`` in contiguous batches and concatenate the output.

    Batches are processed one after another in input order. A
    ``batch_size`` of zero or less falls back to ``DEFAULT_BATCH_SIZE``.

    Example:
        >>> transform_batch([1, 2, 3, 4, 5], lambda b: [n * 2 for n in b], 2)
        [2, 4, 6, 8, 10]
    """
    if batch_size <= 0:
        batch_size = DEFAULT_BATCH_SIZE

    result: list[R] = []
    for start in range(0, len(items), batch_size):
        result.extend(fn(items[start : start + batch_size]))

    return result
