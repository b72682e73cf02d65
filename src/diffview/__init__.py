#  Copyright (c) 2025 Tom Villani, Ph.D.
"""diffview - line-level comparison of text, JSON and XML with a virtualized viewer.

diffview compares two text blobs line by line and annotates every line as
added, removed, changed or unchanged while keeping track of which lines
correspond across the two sides. Inputs can be normalized before comparison
(whitespace collapsing, case folding, JSON key order, XML attribute order).

The viewport package renders arbitrarily long results by materializing only
the rows near the visible area, with scroll input throttled to one update
per animation frame.

Requirements
------------
- Python 3.10+
- defusedxml (XML attribute normalization)
- rich (terminal render layer)

Examples
--------
Compare two JSON documents regardless of key order:

    >>> from diffview import DiffOptions, compare_texts
    >>> result = compare_texts(
    ...     '{"b": 2, "a": 1}',
    ...     '{"a": 1, "b": 2}',
    ...     DiffOptions(ignore_key_order=True),
    ...     left_format="json",
    ...     right_format="json",
    ... )
    >>> result.has_changes
    False

Diff pre-split lines directly:

    >>> from diffview import diff
    >>> [line.type.value for line in diff(["a", "b"], ["a"]).left_lines]
    ['unchanged', 'removed']

"""

from diffview.diff import (
    DiffLine,
    DiffResult,
    DiffStats,
    DiffType,
    compare_texts,
    compute_line_diff,
    diff,
    split_lines,
)
from diffview.exceptions import (
    DiffViewError,
    FormatMismatchError,
    NormalizationError,
    ValidationError,
    ViewportError,
)
from diffview.logging_utils import configure_logging, reset_logging
from diffview.options import DiffOptions, ViewportOptions
from diffview.viewport import ScrollCoordinator, SplitDiffView, ViewportWindow, compute_window

__all__ = [
    "DiffLine",
    "DiffOptions",
    "DiffResult",
    "DiffStats",
    "DiffType",
    "DiffViewError",
    "FormatMismatchError",
    "NormalizationError",
    "ScrollCoordinator",
    "SplitDiffView",
    "ValidationError",
    "ViewportError",
    "ViewportOptions",
    "ViewportWindow",
    "compare_texts",
    "compute_line_diff",
    "compute_window",
    "configure_logging",
    "diff",
    "reset_logging",
    "split_lines",
]
