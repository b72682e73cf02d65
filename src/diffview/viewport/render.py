#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/viewport/render.py
"""Render layers that receive the materialized subset of diff rows.

A render layer is handed, per frame, only ``lines[start:end + 1]`` together
with the window it came from. It positions the whole subset with the
window's ``top_offset_px`` rather than placing rows individually, and drops
rows from the previous frame instead of hiding them.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from diffview.diff.models import DiffLine, DiffType
from diffview.viewport.window import ViewportWindow

logger = logging.getLogger(__name__)

_TYPE_STYLES = {
    DiffType.ADDED: "green",
    DiffType.REMOVED: "red",
    DiffType.CHANGED: "yellow",
    DiffType.UNCHANGED: "",
}

_TYPE_MARKERS = {
    DiffType.ADDED: "+",
    DiffType.REMOVED: "-",
    DiffType.CHANGED: "~",
    DiffType.UNCHANGED: " ",
}


class RenderLayer(Protocol):
    """Receives the rows to mount for the current frame."""

    def render(self, rows: Sequence[DiffLine], window: ViewportWindow) -> None:
        """Replace the mounted rows with ``rows``, positioned by ``window``."""
        ...


class ConsoleRenderLayer:
    """Terminal render layer built on ``rich``.

    Only the rows of the latest frame are kept in ``mounted_rows``; rows
    from earlier frames are released when a new frame arrives.

    Parameters
    ----------
    console : rich.console.Console, optional
        Console to draw on; a new stdout console is created when omitted
    title : str, optional
        Panel title shown above the rows
    draw : bool, default True
        If False, rows are mounted but not printed (useful when the host only
        needs ``to_renderable``)

    """

    def __init__(self, console: Console | None = None, title: str | None = None, draw: bool = True) -> None:
        """Initialize the render layer with no mounted rows."""
        self.console = console or Console()
        self.title = title
        self.draw = draw
        self.mounted_rows: tuple[DiffLine, ...] = ()
        self.window: ViewportWindow | None = None
        self.render_count = 0

    @property
    def offset_px(self) -> float:
        """Translation applied to the mounted subset."""
        return self.window.top_offset_px if self.window is not None else 0

    def render(self, rows: Sequence[DiffLine], window: ViewportWindow) -> None:
        """Mount ``rows`` for ``window`` and draw them."""
        self.mounted_rows = tuple(rows)
        self.window = window
        self.render_count += 1
        logger.debug(f"Mounted rows {window.start_index}-{window.end_index} at offset {window.top_offset_px}")

        if self.draw:
            self.console.print(self.to_renderable())

    def to_renderable(self) -> Table:
        """Build a ``rich`` table of the mounted rows."""
        caption = None
        if self.window is not None and not self.window.is_empty:
            caption = f"rows {self.window.start_index + 1}-{self.window.end_index + 1}, offset {self.offset_px:g}px"

        table = Table(title=self.title, caption=caption, show_header=False, box=None, pad_edge=False)
        table.add_column("line", justify="right", style="dim", no_wrap=True)
        table.add_column("marker", no_wrap=True)
        table.add_column("content", overflow="fold")

        for row in self.mounted_rows:
            style = _TYPE_STYLES[row.type]
            table.add_row(
                str(row.line_number),
                Text(_TYPE_MARKERS[row.type], style=style),
                Text(row.content, style=style),
            )
        return table
