#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/viewport/__init__.py
"""Virtualized rendering of large diffs.

Only the rows inside the visible range plus a small buffer are handed to the
render layer, so the work per frame does not grow with the length of the
diff. Scroll events are coalesced to one window update per animation frame.

Examples
--------
Compute the rows to draw at the top of a 10,000 line diff:
    >>> from diffview.viewport import compute_window
    >>> compute_window(0, 600, 10_000, 24, 20).bounds
    (0, 45)

"""

from diffview.viewport.panels import SplitDiffView
from diffview.viewport.render import ConsoleRenderLayer, RenderLayer
from diffview.viewport.scheduler import AsyncioFrameScheduler, FrameScheduler, ManualFrameScheduler
from diffview.viewport.scroll import ScrollCoordinator, ScrollState
from diffview.viewport.window import ViewportWindow, compute_window, empty_window, max_window_rows

__all__ = [
    "AsyncioFrameScheduler",
    "ConsoleRenderLayer",
    "FrameScheduler",
    "ManualFrameScheduler",
    "RenderLayer",
    "ScrollCoordinator",
    "ScrollState",
    "SplitDiffView",
    "ViewportWindow",
    "compute_window",
    "empty_window",
    "max_window_rows",
]
