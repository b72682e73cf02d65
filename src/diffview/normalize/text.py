#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/normalize/text.py
"""Line-level normalization applied before comparison.

These rewrites are order-preserving and line-count-preserving: they map one
line to one comparison key and never split or join lines.
"""

from __future__ import annotations

import re
from typing import Iterable

from diffview.options import DiffOptions

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace in text.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Text with every whitespace run collapsed to one space, then trimmed

    """
    return _WHITESPACE_RE.sub(" ", text).strip()


def fold_case(text: str, case_sensitive: bool) -> str:
    """Lowercase ``text`` unless the comparison is case sensitive."""
    return text if case_sensitive else text.lower()


def normalize_line(line: str, options: DiffOptions) -> str:
    """Return the comparison key for a single line.

    Parameters
    ----------
    line : str
        Line text without its newline
    options : DiffOptions
        Active comparison options

    Returns
    -------
    str
        Normalized line used for equality tests

    """
    if options.ignore_whitespace:
        line = normalize_whitespace(line)
    return fold_case(line, options.case_sensitive)


def normalize_lines(lines: Iterable[str], options: DiffOptions) -> list[str]:
    """Normalize every line, preserving order and count."""
    if not options.ignore_whitespace and options.case_sensitive:
        return list(lines)
    return [normalize_line(line, options) for line in lines]
