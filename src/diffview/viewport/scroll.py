#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/viewport/scroll.py
"""Frame-throttled scroll handling for one virtualized diff panel.

The coordinator is the only stateful part of the viewport. It keeps the
latest scroll offset in a single slot and a handle for at most one pending
frame:

    IDLE --scroll--> FRAME_PENDING --frame fires--> IDLE
    FRAME_PENDING --scroll--> FRAME_PENDING  (offset overwritten, no new frame)

When the frame fires it recomputes the window from whatever inputs are
current, so a burst of scroll events costs one recomputation and the last
offset wins.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Sequence

from diffview.diff.models import DiffLine
from diffview.options import ViewportOptions
from diffview.viewport.render import RenderLayer
from diffview.viewport.scheduler import FrameScheduler
from diffview.viewport.window import ViewportWindow, compute_window

logger = logging.getLogger(__name__)


class ScrollState(str, Enum):
    """Whether a frame is waiting to recompute the window."""

    IDLE = "idle"
    FRAME_PENDING = "frame_pending"


class ScrollCoordinator:
    """Coalesce scroll input into at most one window update per frame.

    Parameters
    ----------
    render_layer : RenderLayer
        Receives the rows of each new window
    scheduler : FrameScheduler
        Provides animation-frame callbacks
    options : ViewportOptions, optional
        Row height, buffer size and container height
    lines : sequence of DiffLine, optional
        Initial content; rendered immediately when given

    Examples
    --------
        >>> from diffview.viewport.scheduler import ManualFrameScheduler
        >>> scheduler = ManualFrameScheduler()
        >>> coordinator = ScrollCoordinator(layer, scheduler)
        >>> coordinator.set_lines(result.left_lines)
        >>> coordinator.on_scroll(1200)
        >>> scheduler.run_pending()

    """

    def __init__(
        self,
        render_layer: RenderLayer,
        scheduler: FrameScheduler,
        options: ViewportOptions | None = None,
        lines: Sequence[DiffLine] = (),
    ) -> None:
        """Initialize the coordinator in the idle state."""
        self.render_layer = render_layer
        self.scheduler = scheduler
        self.options = options or ViewportOptions()
        self.lines: tuple[DiffLine, ...] = ()
        self.scroll_offset: float = 0
        self.window: ViewportWindow | None = None
        self.renders = 0
        self.coalesced_events = 0
        self._frame_handle: Any = None

        if lines:
            self.set_lines(lines)

    @property
    def state(self) -> ScrollState:
        """Current state of the frame state machine."""
        return ScrollState.IDLE if self._frame_handle is None else ScrollState.FRAME_PENDING

    @property
    def visible_rows(self) -> Sequence[DiffLine]:
        """Rows of the most recently rendered window."""
        if self.window is None:
            return ()
        return self.window.slice(self.lines)

    def on_scroll(self, offset: float) -> None:
        """Record a scroll event and make sure one frame is pending.

        Parameters
        ----------
        offset : float
            Raw scroll offset reported by the host

        """
        self.scroll_offset = offset
        if self._frame_handle is not None:
            self.coalesced_events += 1
            return
        self._schedule()

    def resize(self, container_height: float) -> None:
        """Record a new container height and recompute on the next frame."""
        self.options = self.options.create_updated(container_height=container_height)
        if self._frame_handle is None:
            self._schedule()

    def set_lines(self, lines: Sequence[DiffLine]) -> None:
        """Replace the content, scroll back to the top and render immediately.

        A frame that is already pending is left in place; it will recompute
        from the new content and find nothing to change.
        """
        self.lines = tuple(lines)
        self.scroll_offset = 0
        self.refresh(force=True)

    def refresh(self, force: bool = False) -> ViewportWindow:
        """Recompute the window now and render it if its range changed.

        Parameters
        ----------
        force : bool, default False
            Render even when the range is unchanged (used after content
            replacement, where the same indices point at new rows)

        Returns
        -------
        ViewportWindow
            The current window

        """
        window = compute_window(
            self.scroll_offset,
            self.options.container_height,
            len(self.lines),
            self.options.row_height,
            self.options.buffer_size,
        )
        previous = self.window
        self.window = window

        if force or previous is None or previous.bounds != window.bounds:
            self.render_layer.render(window.slice(self.lines), window)
            self.renders += 1
        else:
            logger.debug(f"Window {window.bounds} unchanged, skipping render")
        return window

    def close(self) -> None:
        """Cancel any pending frame."""
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    def _schedule(self) -> None:
        self._frame_handle = self.scheduler.request_frame(self._on_frame)

    def _on_frame(self) -> None:
        self._frame_handle = None
        if self.coalesced_events:
            logger.debug(f"Frame coalesced {self.coalesced_events} scroll events")
        self.coalesced_events = 0
        self.refresh()
