# ABOUTME: Cancellable delayed-task primitive built on the asyncio event loop timer.
# ABOUTME: Each schedule() call replaces the pending timer; fired tasks are left to finish.

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any


class Debouncer:
    """Run a coroutine function once input has been quiet for `delay` seconds.

    Only the timer is cancelled on reschedule. A call that has already fired keeps
    running, so callers that care about ordering must guard their own results.
    """

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, func: Callable[..., Awaitable[Any]], *args: Any) -> None:
        """Cancel any pending call and arm a new one. Must run inside the event loop."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, loop, func, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, loop: asyncio.AbstractEventLoop, func: Callable[..., Awaitable[Any]], args: tuple) -> None:
        self._handle = None
        task = loop.create_task(func(*args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_idle(self) -> None:
        """Wait until no call is pending and every fired call has completed."""
        while self._handle is not None or self._tasks:
            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)
            else:
                await asyncio.sleep(self.delay / 4 or 0.001)
