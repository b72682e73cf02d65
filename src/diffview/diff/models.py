#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/diff/models.py
"""Result types produced by the line-diff engine.

A comparison yields one ``DiffResult`` holding two parallel sequences of
``DiffLine`` objects, one per side. Results are immutable: changing an option
and comparing again produces a new result rather than mutating the old one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DiffType(str, Enum):
    """Classification of a single line."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


_MIRRORED_TYPES = {
    DiffType.ADDED: DiffType.REMOVED,
    DiffType.REMOVED: DiffType.ADDED,
    DiffType.CHANGED: DiffType.CHANGED,
    DiffType.UNCHANGED: DiffType.UNCHANGED,
}


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One classified line on one side of a comparison.

    Parameters
    ----------
    type : DiffType
        How the line relates to the other side
    content : str
        Line text as supplied by the caller
    line_number : int
        1-based position within its own side
    corresponding_line : int or None
        1-based line number of the partner line on the other side; set for
        ``unchanged`` and ``changed`` lines, None for ``added``/``removed``

    """

    type: DiffType
    content: str
    line_number: int
    corresponding_line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping of this line."""
        data: dict[str, Any] = {
            "type": self.type.value,
            "content": self.content,
            "line_number": self.line_number,
        }
        if self.corresponding_line is not None:
            data["corresponding_line"] = self.corresponding_line
        return data


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Per-type line counts across both sides."""

    added: int = 0
    removed: int = 0
    changed: int = 0
    unchanged: int = 0

    @property
    def total_changes(self) -> int:
        """Number of lines that are not unchanged."""
        return self.added + self.removed + self.changed

    def to_dict(self) -> dict[str, int]:
        """Return the counts as a plain mapping."""
        return {
            "lines_added": self.added,
            "lines_removed": self.removed,
            "lines_changed": self.changed,
            "lines_unchanged": self.unchanged,
            "total_changes": self.total_changes,
        }


@dataclass(frozen=True)
class DiffResult:
    """Output of one comparison.

    Parameters
    ----------
    left_lines : tuple of DiffLine
        Classified lines of the left input, in order
    right_lines : tuple of DiffLine
        Classified lines of the right input, in order
    has_changes : bool
        True iff at least one line on either side is not ``unchanged``

    Notes
    -----
    The two sequences need not have the same length. Paired lines
    (``unchanged``/``changed``) cross-reference each other through
    ``corresponding_line``.

    """

    left_lines: tuple[DiffLine, ...]
    right_lines: tuple[DiffLine, ...]
    has_changes: bool

    @property
    def stats(self) -> DiffStats:
        """Count lines per type.

        ``changed`` and ``unchanged`` pairs are counted once per pair, while
        ``removed`` lines come from the left and ``added`` lines from the right.
        """
        counts = {diff_type: 0 for diff_type in DiffType}
        for line in self.left_lines:
            if line.type is not DiffType.ADDED:
                counts[line.type] += 1
        for line in self.right_lines:
            if line.type is DiffType.ADDED:
                counts[line.type] += 1
        return DiffStats(
            added=counts[DiffType.ADDED],
            removed=counts[DiffType.REMOVED],
            changed=counts[DiffType.CHANGED],
            unchanged=counts[DiffType.UNCHANGED],
        )

    def left_text(self) -> str:
        """Reconstruct the left input from its lines."""
        return "\n".join(line.content for line in self.left_lines)

    def right_text(self) -> str:
        """Reconstruct the right input from its lines."""
        return "\n".join(line.content for line in self.right_lines)

    def swapped(self) -> DiffResult:
        """Return the mirrored result for a "swap sides" action.

        Sides trade places and ``added``/``removed`` trade types. Line numbers
        and correspondences carry over unchanged because each still refers to
        the opposite side. This relabels the existing result; it does not
        recompare, so tie-breaks made for the original orientation are kept.
        """

        def mirror(lines: tuple[DiffLine, ...]) -> tuple[DiffLine, ...]:
            return tuple(
                DiffLine(_MIRRORED_TYPES[line.type], line.content, line.line_number, line.corresponding_line)
                for line in lines
            )

        return DiffResult(
            left_lines=mirror(self.right_lines),
            right_lines=mirror(self.left_lines),
            has_changes=self.has_changes,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping of the whole result."""
        return {
            "has_changes": self.has_changes,
            "left": [line.to_dict() for line in self.left_lines],
            "right": [line.to_dict() for line in self.right_lines],
            "statistics": self.stats.to_dict(),
        }
