"""Stable cache keys for memoized calls."""

import hashlib
import json
from collections.abc import Callable

MAX_KEY_LENGTH = 200


def generate_key(func: Callable, arg: object) -> str:
    """Generate a stable string key for a memoized call.

    Args:
        func: The memoized function
        arg: The argument the function was called with

    Returns:
        A stable string key for this call

    The key format is: module.qualname:normalized_arg
    """
    func_name = f"{func.__module__}.{func.__qualname__}"
    key = f"{func_name}:{_serialize_value(arg)}"

    # Hash if too long (keep it manageable)
    if len(key) > MAX_KEY_LENGTH:
        key_hash = hashlib.sha256(key.encode()).hexdigest()[:16]
        return f"{func_name}:{key_hash}"

    return key


def _serialize_value(value: object) -> str:
    """Serialize a value to a stable string representation.

    Args:
        value: Value to serialize

    Returns:
        Stable string representation
    """
    if isinstance(value, (str, int, float, bool, type(None))):
        return json.dumps(value)

    if isinstance(value, (list, tuple)):
        return json.dumps([_serialize_value(v) for v in value])

    if isinstance(value, dict):
        return json.dumps(
            {str(k): _serialize_value(v) for k, v in value.items()},
            sort_keys=True,
        )

    # Sets and frozensets have no order, sort their members
    if isinstance(value, (set, frozenset)):
        return json.dumps(sorted(_serialize_value(v) for v in value))

    # Fallback: use repr (not ideal but better than failing)
    return repr(value)
