import time
from typing import Any, Callable, Optional

from .config import POLL_INTERVAL_MS
from .errors import WaitTimeout


def poll_until(
    probe: Callable[[], Any],
    timeout_ms: int,
    message: str,
    accept: Callable[[Any], bool] = bool,
    interval_ms: int = POLL_INTERVAL_MS,
    sleep: Optional[Callable[[int], None]] = None,
    clock: Callable[[], float] = time.monotonic,
) -> Any:
    """Call ``probe`` until ``accept`` likes its value or the budget runs out.

    The probe always runs at least once. Returns the accepted value; raises
    WaitTimeout carrying the last observed value otherwise. ``sleep`` takes
    milliseconds so a Playwright page can pass its own ``wait_for_timeout``.
    """
    if sleep is None:
        def sleep(ms: int) -> None:
            time.sleep(ms / 1000)

    deadline = clock() + timeout_ms / 1000
    last = None
    while True:
        last = probe()
        if accept(last):
            return last
        if clock() >= deadline:
            raise WaitTimeout(message, last)
        sleep(interval_ms)
