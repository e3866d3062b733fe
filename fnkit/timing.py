"""Timer-driven wrappers: debounce, throttle and delay.

Deferred and throttled actions run on daemon threads so they never keep the
interpreter alive on their own. Actions are fire-and-forget: their return
values are discarded.
"""

import functools
import logging
import threading
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


def _start_timer(wait: float, action: Callable[[], object]) -> threading.Timer:
    timer = threading.Timer(wait, action)
    timer.daemon = True
    timer.start()
    return timer


def debounce(action: Callable[[], object], wait: float) -> Callable[[], None]:
    """Delay ``action`` until ``wait`` seconds have passed since the last call.

    Every call cancels the pending run, if any, and schedules a new one.
    A burst of calls closer together than ``wait`` therefore runs ``action``
    exactly once, ``wait`` seconds after the final call.

    Args:
        action: Zero-argument callable to run
        wait: Quiet period in seconds

    Example:
        save = debounce(flush_to_disk, 0.5)
        for change in changes:
            save()  # flush_to_disk runs once, 0.5s after the last change
    """
    timer: threading.Timer | None = None
    lock = threading.Lock()

    @functools.wraps(action)
    def trigger() -> None:
        nonlocal timer
        with lock:
            if timer is not None:
                timer.cancel()
            timer = _start_timer(wait, action)
        logger.debug("Debounced %r rescheduled in %ss", action, wait)

    return trigger


def throttle(action: Callable[[], object], wait: float) -> Callable[[], None]:
    """Run ``action`` at most once every ``wait`` seconds.

    The first call runs immediately. Calls made less than ``wait`` seconds
    after the last run are dropped, not queued. A call exactly ``wait``
    seconds later is allowed through.

    The action runs on its own thread so a slow action does not block the
    caller.

    Args:
        action: Zero-argument callable to run
        wait: Minimum interval between runs, in seconds
    """
    last_invoke: float | None = None
    lock = threading.Lock()

    @functools.wraps(action)
    def trigger() -> None:
        nonlocal last_invoke
        with lock:
            now = time.monotonic()
            if last_invoke is not None and now - last_invoke < wait:
                return
            last_invoke = now

        worker = threading.Thread(target=action, daemon=True)
        worker.start()

    return trigger


def delay(action: Callable[[], object], wait: float) -> None:
    """Run ``action`` once after ``wait`` seconds without blocking."""
    _start_timer(wait, action)
