"""Basic usage examples for fnkit."""

import time

from fnkit import after, debounce, memoize, once, retry, throttle


# Example 1: Memoize a recursive function
@memoize
def fib(n):
    """Fibonacci with every intermediate value cached."""
    return n if n <= 1 else fib(n - 1) + fib(n - 2)


# Example 2: One-time initialization
@once
def load_settings():
    """Pretend to read a settings file."""
    print("📂 Reading settings file")
    return {"theme": "dark"}


# Example 3: Retry a flaky call
attempts = 0


def flaky_fetch():
    """Fail twice, then succeed."""
    global attempts
    attempts += 1
    if attempts < 3:
        raise ConnectionError(f"attempt {attempts} failed")
    return {"status": "ok"}


if __name__ == "__main__":
    print("=" * 60)
    print("Example 1: Memoize")
    print("=" * 60)
    print(f"fib(80) = {fib(80)}\n")

    print("=" * 60)
    print("Example 2: Once")
    print("=" * 60)
    load_settings()
    load_settings()
    print("Notice: the settings file was only read once!\n")

    print("=" * 60)
    print("Example 3: Retry")
    print("=" * 60)
    print(f"Result: {retry(flaky_fetch, max_retries=5, delay=0.1)()}")
    print(f"Attempts made: {attempts}\n")

    print("=" * 60)
    print("Example 4: Debounce and throttle")
    print("=" * 60)
    save = debounce(lambda: print("💾 Saved"), 0.2)
    ping = throttle(lambda: print("📡 Ping"), 0.2)
    for _ in range(5):
        save()
        ping()
    time.sleep(0.4)
    print("Notice: one save and one ping for five calls each!\n")

    print("=" * 60)
    print("Example 5: After")
    print("=" * 60)
    finish = after(3, lambda: print("✅ All three jobs reported in"))
    for job in ("a", "b", "c"):
        print(f"Job {job} done")
        finish()
