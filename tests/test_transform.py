"""Tests for bulk transforms."""

import threading
import time

import pytest

from fnkit import (
    transform_batch,
    transform_concurrent,
    transform_list,
    transform_list_with_error,
    transform_map,
)


def test_transform_list():
    """Test that items are transformed in order."""
    assert transform_list([1, 2, 3], lambda x: x * x) == [1, 4, 9]


def test_transform_list_empty():
    """Test that empty input gives an empty list."""
    assert transform_list([], str) == []


def test_transform_map():
    """Test that values are transformed and keys kept."""
    ages = {"John": 30, "Jane": 25}

    assert transform_map(ages, lambda age: age * 2) == {"John": 60, "Jane": 50}
    assert transform_map({}, str) == {}


def test_transform_list_with_error():
    """Test that failing items are dropped and their errors collected."""

    def to_str_odd_only(n):
        if n % 2 == 0:
            raise ValueError(f"{n} is even")
        return str(n)

    results, errors = transform_list_with_error([1, 2, 3, 4, 5], to_str_odd_only)

    assert results == ["1", "3", "5"]
    assert len(errors) == 2
    assert [str(e) for e in errors] == ["2 is even", "4 is even"]


def test_transform_list_with_error_empty():
    """Test that empty input gives two empty lists."""
    assert transform_list_with_error([], int) == ([], [])


def test_transform_concurrent_preserves_order():
    """Test that output order matches input order."""
    assert transform_concurrent([1, 2, 3, 4, 5, 6], str, 3) == [
        "1",
        "2",
        "3",
        "4",
        "5",
        "6",
    ]


@pytest.mark.parametrize("extra", [0, 1, 2, 3, 4])
def test_transform_concurrent_matches_transform_list(extra):
    """Test equivalence with the sequential transform for many worker counts."""
    items = list(range(23))

    def fn(x):
        return x * 3 + 1

    expected = transform_list(items, fn)
    for workers in (1, 2, len(items), len(items) + 5, 4 + extra):
        assert transform_concurrent(items, fn, workers) == expected


def test_transform_concurrent_empty():
    """Test that empty input gives an empty list."""
    assert transform_concurrent([], str, 4) == []


def test_transform_concurrent_uses_threads():
    """Test that chunks run on separate worker threads."""
    seen = set()
    lock = threading.Lock()

    def record_thread(x):
        with lock:
            seen.add(threading.get_ident())
        time.sleep(0.01)
        return x

    result = transform_concurrent(list(range(8)), record_thread, 4)

    assert result == list(range(8))
    assert threading.get_ident() not in seen
    assert len(seen) > 1


def test_transform_concurrent_reverse_completion_order():
    """Test that later chunks finishing first does not reorder output."""

    def slow_for_small(x):
        time.sleep(0.01 * (10 - x))
        return x * 10

    assert transform_concurrent(list(range(10)), slow_for_small, 5) == [
        x * 10 for x in range(10)
    ]


def test_transform_concurrent_propagates_exception():
    """Test that a worker exception is re-raised after all workers finish."""
    finished = []
    lock = threading.Lock()

    def fn(x):
        if x == 1:
            raise ValueError("bad item")
        time.sleep(0.02)
        with lock:
            finished.append(x)
        return x

    with pytest.raises(ValueError, match="bad item"):
        transform_concurrent([0, 1, 2, 3, 4, 5], fn, 3)

    # Other chunks ran to completion before the error surfaced
    assert sorted(finished) == [0, 2, 3, 4, 5]


def test_transform_batch():
    """Test that batches are contiguous and processed in order."""
    batches = []

    def double_batch(batch):
        batches.append(list(batch))
        return [n * 2 for n in batch]

    result = transform_batch([1, 2, 3, 4, 5, 6, 7], double_batch, 3)

    assert batches == [[1, 2, 3], [4, 5, 6], [7]]
    assert result == transform_list([1, 2, 3, 4, 5, 6, 7], lambda n: n * 2)


def test_transform_batch_default_size():
    """Test that a non-positive batch size falls back to 100."""
    sizes = []

    def record_size(batch):
        sizes.append(len(batch))
        return batch

    items = list(range(250))
    for batch_size in (0, -5):
        sizes.clear()
        assert transform_batch(items, record_size, batch_size) == items
        assert sizes == [100, 100, 50]


def test_transform_batch_empty():
    """Test that empty input never calls the batch function."""
    calls = []
    assert transform_batch([], lambda b: calls.append(b) or b, 3) == []
    assert calls == []
