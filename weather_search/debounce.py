# ABOUTME: Cancellable one-shot timer used to debounce search keystrokes.
# ABOUTME: Wraps the running event loop's call_later so a restart always drops the previous timer.

import asyncio
from collections.abc import Callable


class DebounceTimer:
    """Run a callback once input has been quiet for `delay` seconds.

    Starting the timer again before it fires cancels the pending call and
    restarts the quiet period. Must be used from inside a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def fire_now(self) -> bool:
        """Fire a pending callback immediately. Returns False if nothing was pending."""
        if self._handle is None:
            return False
        self.cancel()
        self._callback()
        return True

    def _fire(self) -> None:
        self._handle = None
        self._callback()

    def __enter__(self) -> "DebounceTimer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()
