#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/diff/renderers/__init__.py
"""Export renderers for diff results."""

from diffview.diff.renderers.json import JsonDiffRenderer, render_to_file

__all__ = [
    "JsonDiffRenderer",
    "render_to_file",
]
