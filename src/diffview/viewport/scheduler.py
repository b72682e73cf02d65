#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/viewport/scheduler.py
"""Animation-frame schedulers for the scroll coordinator.

The coordinator never runs its own timer. It asks a ``FrameScheduler`` to call
it back on the next frame, and the host decides what a frame is, for example
an asyncio timer or an explicit pump in tests.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol

from diffview.constants import FRAME_INTERVAL_SECONDS

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Schedules a callback for the next animation frame."""

    def request_frame(self, callback: FrameCallback) -> Any:
        """Schedule ``callback`` and return an opaque handle for cancellation."""
        ...

    def cancel_frame(self, handle: Any) -> None:
        """Cancel a callback that has not fired yet."""
        ...


class ManualFrameScheduler:
    """Scheduler whose frames fire only when the host calls ``run_pending``.

    Useful for headless hosts and for tests that need to control exactly when
    a frame happens.

    Examples
    --------
        >>> scheduler = ManualFrameScheduler()
        >>> handle = scheduler.request_frame(lambda: print("frame"))
        >>> scheduler.run_pending()
        frame
        1

    """

    def __init__(self) -> None:
        """Initialize with no pending frames."""
        self._pending: dict[int, FrameCallback] = {}
        self._next_handle = 0
        self.frames_run = 0

    @property
    def pending_count(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        """Queue ``callback`` for the next ``run_pending`` call."""
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        """Drop a queued callback; unknown handles are ignored."""
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """Fire every callback queued before this call.

        Callbacks requested while the frame runs wait for the next frame.

        Returns
        -------
        int
            Number of callbacks fired

        """
        callbacks = list(self._pending.values())
        self._pending.clear()
        for callback in callbacks:
            callback()
        self.frames_run += 1
        return len(callbacks)


class AsyncioFrameScheduler:
    """Scheduler that fires callbacks on an asyncio loop after one frame interval.

    Parameters
    ----------
    loop : asyncio.AbstractEventLoop, optional
        Loop to schedule on; defaults to the running loop at request time
    interval : float, default 1/60
        Seconds between a request and its callback

    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        interval: float = FRAME_INTERVAL_SECONDS,
    ) -> None:
        """Initialize the scheduler."""
        self._loop = loop
        self.interval = interval

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        """Schedule ``callback`` one frame interval from now."""
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self.interval, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        """Cancel a scheduled callback."""
        handle.cancel()
