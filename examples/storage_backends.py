"""Examples of using different memoize storage backends."""

import time

from fnkit import memoize
from fnkit.stores import FileStore

# Example 1: MemoryStore (default, single process only)
print("=" * 60)
print("Example 1: MemoryStore (in-memory, single process)")
print("=" * 60)


@memoize
def exchange_rate_memory(currency: str) -> float:
    """Look up an exchange rate (using default MemoryStore)."""
    print(f"  → Fetching rate for {currency}")
    time.sleep(0.2)
    return {"EUR": 0.92, "GBP": 0.79}.get(currency, 1.0)


# First call - executes
print(f"First call result: {exchange_rate_memory('EUR')}")

# Second call - returns cached result
print(f"Second call result: {exchange_rate_memory('EUR')}")

# Different argument - executes again
print(f"Different argument result: {exchange_rate_memory('GBP')}")

print()

# Example 2: FileStore (persistent across restarts)
print("=" * 60)
print("Example 2: FileStore (persistent across restarts)")
print("=" * 60)

file_store = FileStore("/tmp/fnkit_demo")


@memoize(store=file_store)
def exchange_rate_file(currency: str) -> float:
    """Look up an exchange rate (using FileStore)."""
    print(f"  → Fetching rate for {currency}")
    time.sleep(0.2)
    return {"EUR": 0.92, "GBP": 0.79}.get(currency, 1.0)


print(f"Result: {exchange_rate_file('EUR')}")
print("Run this script again: the rate comes from disk without fetching.")

print()

# Example 3: RedisStore (shared across processes and servers)
print("=" * 60)
print("Example 3: RedisStore (requires a running Redis)")
print("=" * 60)

try:
    from redis import Redis

    from fnkit.stores import RedisStore

    redis_store = RedisStore(Redis(host="localhost", port=6379), prefix="demo:")

    @memoize(store=redis_store)
    def exchange_rate_redis(currency: str) -> float:
        print(f"  → Fetching rate for {currency}")
        return {"EUR": 0.92, "GBP": 0.79}.get(currency, 1.0)

    print(f"Result: {exchange_rate_redis('EUR')}")
    print(f"Cached result: {exchange_rate_redis('EUR')}")
except Exception as e:
    print(f"Skipping Redis example: {e}")
