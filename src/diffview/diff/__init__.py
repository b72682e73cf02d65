#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/diff/__init__.py
"""Line-level comparison of two text blobs.

Key Features
------------
- Greedy two-pointer diff with cross-side line correspondence
- Optional whitespace and case normalization per line
- JSON key-order / XML attribute-order normalization for structured input
- Character-level highlighting for changed line pairs
- JSON export of results

Examples
--------
Compare two texts:
    >>> from diffview.diff import compare_texts
    >>> result = compare_texts("a\\nb\\nc", "a\\nB\\nc")
    >>> [line.type.value for line in result.left_lines]
    ['unchanged', 'changed', 'unchanged']

Ignore case:
    >>> from diffview.options import DiffOptions
    >>> compare_texts("a\\nb", "A\\nB", DiffOptions(case_sensitive=False)).has_changes
    False

"""

from diffview.diff.engine import compare_texts, diff, split_lines
from diffview.diff.inline import LineDiff, LineDiffPart, compute_line_diff
from diffview.diff.models import DiffLine, DiffResult, DiffStats, DiffType

__all__ = [
    "DiffLine",
    "DiffResult",
    "DiffStats",
    "DiffType",
    "LineDiff",
    "LineDiffPart",
    "compare_texts",
    "compute_line_diff",
    "diff",
    "split_lines",
]
