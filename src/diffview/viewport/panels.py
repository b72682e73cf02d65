#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/viewport/panels.py
"""Side-by-side view of one diff result in two independently scrolling panels."""

from __future__ import annotations

from diffview.diff.models import DiffResult
from diffview.options import ViewportOptions
from diffview.viewport.render import RenderLayer
from diffview.viewport.scheduler import FrameScheduler
from diffview.viewport.scroll import ScrollCoordinator


class SplitDiffView:
    """Two scroll coordinators sharing one immutable ``DiffResult``.

    Each panel keeps its own scroll offset and pending frame. The result is
    never copied or mutated, so both panels read from it directly.

    Parameters
    ----------
    left_layer : RenderLayer
        Render layer for the left panel
    right_layer : RenderLayer
        Render layer for the right panel
    scheduler : FrameScheduler
        Frame scheduler shared by both panels
    options : ViewportOptions, optional
        Geometry applied to both panels

    """

    def __init__(
        self,
        left_layer: RenderLayer,
        right_layer: RenderLayer,
        scheduler: FrameScheduler,
        options: ViewportOptions | None = None,
    ) -> None:
        """Create both panels with no content."""
        self.left = ScrollCoordinator(left_layer, scheduler, options)
        self.right = ScrollCoordinator(right_layer, scheduler, options)
        self.result: DiffResult | None = None

    def set_result(self, result: DiffResult) -> None:
        """Show a new comparison result, resetting both panels to the top."""
        self.result = result
        self.left.set_lines(result.left_lines)
        self.right.set_lines(result.right_lines)

    def scroll_left(self, offset: float) -> None:
        """Scroll the left panel only."""
        self.left.on_scroll(offset)

    def scroll_right(self, offset: float) -> None:
        """Scroll the right panel only."""
        self.right.on_scroll(offset)

    def scroll_both(self, offset: float) -> None:
        """Scroll both panels to the same offset."""
        self.left.on_scroll(offset)
        self.right.on_scroll(offset)

    def resize(self, container_height: float) -> None:
        """Apply a new container height to both panels."""
        self.left.resize(container_height)
        self.right.resize(container_height)

    def close(self) -> None:
        """Cancel pending frames on both panels."""
        self.left.close()
        self.right.close()
