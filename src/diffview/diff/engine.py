#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/diff/engine.py
"""Greedy two-pointer line diff.

This is not a longest-common-subsequence diff. Two cursors walk the left and
right sequences; when the current lines differ, the engine looks for the
nearest reappearance of each line on the opposite side and decides from that
alone whether the right line was added, the left line was removed, or the
pair changed:

1. ``left[i]`` reappears in ``right[j+1:]`` before ``right[j]`` reappears in
   ``left[i+1:]`` (or ``right[j]`` never does): ``right[j]`` is added.
2. Otherwise, if ``right[j]`` reappears in ``left[i+1:]``: ``left[i]`` is
   removed.
3. Otherwise neither line comes back: the two lines are a changed pair.

The two reappearance indices belong to different sides and are compared as
plain integers, exactly as written above. When a line repeats with slightly
different neighbours this can yield a larger changed block than an optimal
diff would; that behaviour is intentional and covered by regression tests.

Reappearance lookups use a per-side index of line positions searched with
``bisect``, so each step costs O(log n) instead of a linear scan.
"""

from __future__ import annotations

import logging
import time
from bisect import bisect_right
from typing import Sequence

from diffview.constants import DiffFormat
from diffview.diff.models import DiffLine, DiffResult, DiffType
from diffview.exceptions import FormatMismatchError
from diffview.normalize.api import normalize_pair
from diffview.normalize.text import normalize_lines
from diffview.options import DiffOptions

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text into lines on ``\\n`` after folding CRLF/CR line endings.

    An empty string is one empty line, not zero lines.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _build_position_index(keys: Sequence[str]) -> dict[str, list[int]]:
    index: dict[str, list[int]] = {}
    for position, key in enumerate(keys):
        index.setdefault(key, []).append(position)
    return index


def _next_occurrence(
    index: dict[str, list[int]],
    key: str,
    after: int,
    lookahead_limit: int | None,
) -> int | None:
    """Return the first position of ``key`` strictly after ``after``, if any."""
    positions = index.get(key)
    if not positions:
        return None
    slot = bisect_right(positions, after)
    if slot == len(positions):
        return None
    position = positions[slot]
    if lookahead_limit is not None and position - after > lookahead_limit:
        return None
    return position


def diff(
    left_lines: Sequence[str],
    right_lines: Sequence[str],
    options: DiffOptions | None = None,
) -> DiffResult:
    """Classify every line of two sequences.

    Parameters
    ----------
    left_lines : sequence of str
        Lines of the left (original) input
    right_lines : sequence of str
        Lines of the right (updated) input
    options : DiffOptions, optional
        Line normalization and lookahead options. Lines are compared by
        their normalized key while ``DiffLine.content`` keeps the text as given.

    Returns
    -------
    DiffResult
        Two annotated sequences and the ``has_changes`` flag

    Examples
    --------
        >>> result = diff(["a"], ["a", "b"])
        >>> [line.type.value for line in result.right_lines]
        ['unchanged', 'added']

    """
    if options is None:
        options = DiffOptions()

    left_keys = normalize_lines(left_lines, options)
    right_keys = normalize_lines(right_lines, options)
    left_index = _build_position_index(left_keys)
    right_index = _build_position_index(right_keys)
    limit = options.lookahead_limit

    left_result: list[DiffLine] = []
    right_result: list[DiffLine] = []
    has_changes = False
    i = 0
    j = 0
    n_left = len(left_lines)
    n_right = len(right_lines)

    while i < n_left or j < n_right:
        if i >= n_left:
            right_result.append(DiffLine(DiffType.ADDED, right_lines[j], j + 1))
            has_changes = True
            j += 1
        elif j >= n_right:
            left_result.append(DiffLine(DiffType.REMOVED, left_lines[i], i + 1))
            has_changes = True
            i += 1
        elif left_keys[i] == right_keys[j]:
            left_result.append(DiffLine(DiffType.UNCHANGED, left_lines[i], i + 1, j + 1))
            right_result.append(DiffLine(DiffType.UNCHANGED, right_lines[j], j + 1, i + 1))
            i += 1
            j += 1
        else:
            left_next = _next_occurrence(right_index, left_keys[i], j, limit)
            right_next = _next_occurrence(left_index, right_keys[j], i, limit)
            has_changes = True

            if left_next is not None and (right_next is None or left_next < right_next):
                right_result.append(DiffLine(DiffType.ADDED, right_lines[j], j + 1))
                j += 1
            elif right_next is not None:
                left_result.append(DiffLine(DiffType.REMOVED, left_lines[i], i + 1))
                i += 1
            else:
                left_result.append(DiffLine(DiffType.CHANGED, left_lines[i], i + 1, j + 1))
                right_result.append(DiffLine(DiffType.CHANGED, right_lines[j], j + 1, i + 1))
                i += 1
                j += 1

    return DiffResult(
        left_lines=tuple(left_result),
        right_lines=tuple(right_result),
        has_changes=has_changes,
    )


def compare_texts(
    left: str,
    right: str,
    options: DiffOptions | None = None,
    left_format: DiffFormat = "text",
    right_format: DiffFormat = "text",
) -> DiffResult:
    """Normalize, split and diff two text blobs.

    Parameters
    ----------
    left : str
        Left (original) text, already validated and formatted by the caller
    right : str
        Right (updated) text
    options : DiffOptions, optional
        Comparison options
    left_format : {"text", "json", "xml"}, default "text"
        Declared format of ``left``
    right_format : {"text", "json", "xml"}, default "text"
        Declared format of ``right``

    Returns
    -------
    DiffResult
        Fresh comparison result

    Raises
    ------
    FormatMismatchError
        If the two sides declare different formats

    Examples
    --------
        >>> opts = DiffOptions(ignore_key_order=True)
        >>> compare_texts('{"b":2,"a":1}', '{"a":1,"b":2}', opts, "json", "json").has_changes
        False

    """
    if left_format != right_format:
        raise FormatMismatchError(left_format, right_format)
    if options is None:
        options = DiffOptions()

    start = time.perf_counter()
    left_text, right_text = normalize_pair(left, right, left_format, right_format, options)
    result = diff(split_lines(left_text), split_lines(right_text), options)
    elapsed = time.perf_counter() - start

    logger.debug(
        f"Compared {len(result.left_lines)} left / {len(result.right_lines)} right lines "
        f"as {left_format} in {elapsed:.4f}s (changes={result.has_changes})"
    )
    return result
