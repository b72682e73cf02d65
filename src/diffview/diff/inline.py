#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/diff/inline.py
"""Character-level highlighting inside a changed line pair."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineDiffPart:
    """A run of characters and whether it was added or removed."""

    value: str
    added: bool = False
    removed: bool = False


@dataclass(frozen=True, slots=True)
class LineDiff:
    """Character-level comparison of two lines."""

    same: bool
    parts: tuple[LineDiffPart, ...]


def compute_line_diff(left: str, right: str) -> LineDiff:
    """Split a pair of lines into equal, removed and added runs.

    Both strings are walked in lockstep. Runs of matching characters become a
    single plain part; at each mismatch one character is taken from each side
    and emitted as a removed part followed by an added part. This is a
    positional comparison intended for highlighting small edits, not an
    alignment: an insertion early in a line marks the rest of the line as
    changed.

    Parameters
    ----------
    left : str
        Line from the left side
    right : str
        Line from the right side

    Returns
    -------
    LineDiff
        ``same`` is True only for identical strings

    Examples
    --------
        >>> [(p.value, p.added, p.removed) for p in compute_line_diff("cat", "cut").parts]
        [('c', False, False), ('a', False, True), ('u', True, False), ('t', False, False)]

    """
    if left == right:
        return LineDiff(same=True, parts=(LineDiffPart(left),))

    parts: list[LineDiffPart] = []
    i = 0
    j = 0
    while i < len(left) or j < len(right):
        if i < len(left) and j < len(right) and left[i] == right[j]:
            start = i
            while i < len(left) and j < len(right) and left[i] == right[j]:
                i += 1
                j += 1
            parts.append(LineDiffPart(left[start:i]))
            continue

        if i < len(left):
            parts.append(LineDiffPart(left[i], removed=True))
            i += 1
        if j < len(right):
            parts.append(LineDiffPart(right[j], added=True))
            j += 1

    return LineDiff(same=False, parts=tuple(parts))
