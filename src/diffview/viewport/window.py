#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/viewport/window.py
"""Viewport geometry for virtualized rendering of diff rows.

Every row has the same fixed height, so the visible range follows from the
scroll offset with constant-time arithmetic. Variable row heights would need
a prefix-sum index over row offsets; that is not supported.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

from diffview.exceptions import ViewportError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ViewportWindow:
    """The slice of rows to materialize for one frame.

    Parameters
    ----------
    start_index : int
        First row to render (inclusive)
    end_index : int
        Last row to render (inclusive); ``-1`` for an empty window
    total_height : float
        Height of all rows, used to size the scroll spacer
    top_offset_px : float
        Translation applied to the rendered subset so it sits at its true
        position inside the spacer
    row_height : float
        Fixed height of every row
    buffer_size : int
        Rows rendered beyond each edge of the visible range

    """

    start_index: int
    end_index: int
    total_height: float
    top_offset_px: float
    row_height: float
    buffer_size: int

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render."""
        return self.end_index < self.start_index

    @property
    def size(self) -> int:
        """Number of rows materialized."""
        return 0 if self.is_empty else self.end_index - self.start_index + 1

    @property
    def bounds(self) -> tuple[int, int]:
        """The inclusive ``(start_index, end_index)`` pair."""
        return self.start_index, self.end_index

    def indices(self) -> range:
        """Row indices covered by the window."""
        return range(self.start_index, self.end_index + 1)

    def slice(self, rows: Sequence[T]) -> Sequence[T]:
        """Return ``rows[start_index:end_index + 1]``."""
        if self.is_empty:
            return rows[0:0]
        return rows[self.start_index : self.end_index + 1]


def max_window_rows(container_height: float, row_height: float, buffer_size: int) -> int:
    """Upper bound on the rows a window may hold, independent of row count."""
    if row_height <= 0:
        raise ViewportError(
            f"row_height must be positive, got {row_height}",
            parameter_name="row_height",
            parameter_value=row_height,
        )
    if container_height <= 0:
        return 0
    return math.ceil(container_height / row_height) + 2 * max(0, buffer_size)


def empty_window(row_height: float, buffer_size: int = 0, total_height: float = 0) -> ViewportWindow:
    """Return a window that renders nothing."""
    return ViewportWindow(
        start_index=0,
        end_index=-1,
        total_height=total_height,
        top_offset_px=0,
        row_height=row_height,
        buffer_size=max(0, buffer_size),
    )


def compute_window(
    scroll_offset: float,
    container_height: float,
    total_items: int,
    row_height: float,
    buffer_size: int,
) -> ViewportWindow:
    """Compute which rows to materialize for a scroll position.

    Parameters
    ----------
    scroll_offset : float
        Distance scrolled from the top; negative values are treated as 0
    container_height : float
        Height of the visible area; zero or negative yields an empty window
    total_items : int
        Number of rows in the list
    row_height : float
        Fixed height of every row; must be positive
    buffer_size : int
        Extra rows above and below the visible range; negative values are
        treated as 0

    Returns
    -------
    ViewportWindow
        Inclusive row range, spacer height and translation offset. The range
        holds at most ``ceil(container_height / row_height) + 2 * buffer_size``
        rows, and its start never decreases as ``scroll_offset`` grows.

    Raises
    ------
    ViewportError
        If ``row_height`` is zero or negative

    Examples
    --------
        >>> window = compute_window(0, 600, 10_000, 24, 20)
        >>> window.bounds
        (0, 45)

    """
    limit = max_window_rows(container_height, row_height, buffer_size)
    buffer_size = max(0, buffer_size)
    scroll_offset = max(0, scroll_offset)
    total_height = max(0, total_items) * row_height

    if total_items <= 0 or limit == 0:
        return empty_window(row_height, buffer_size, total_height)

    last = total_items - 1
    raw_start = math.floor(scroll_offset / row_height) - buffer_size
    raw_end = math.ceil((scroll_offset + container_height) / row_height) + buffer_size

    start_index = min(max(raw_start, 0), last)
    end_index = min(max(raw_end, 0), last, start_index + limit - 1)

    return ViewportWindow(
        start_index=start_index,
        end_index=end_index,
        total_height=total_height,
        top_offset_px=start_index * row_height,
        row_height=row_height,
        buffer_size=buffer_size,
    )
