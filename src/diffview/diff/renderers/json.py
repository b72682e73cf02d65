#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/diff/renderers/json.py
"""JSON diff renderer for structured output.

This renderer serializes a ``DiffResult`` into machine-readable JSON for
export, API responses and further analysis.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from diffview.diff.models import DiffResult


class JsonDiffRenderer:
    """Render a side-by-side diff result as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
    Render diff as JSON:
        >>> from diffview.diff import compare_texts
        >>> from diffview.diff.renderers import JsonDiffRenderer
        >>> result = compare_texts("a\\nb", "a\\nc")
        >>> json_output = JsonDiffRenderer().render(result)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def render(self, diff: DiffResult) -> str:
        """Render a diff result to a JSON string.

        Parameters
        ----------
        diff : DiffResult
            Comparison result to serialize

        Returns
        -------
        str
            JSON-formatted diff output with ``type``, ``has_changes``,
            ``left``, ``right`` and ``statistics`` keys

        """
        data: dict[str, Any] = {"type": "side_by_side_diff"}
        data.update(diff.to_dict())

        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        else:
            return json.dumps(data, ensure_ascii=False)


def render_to_file(diff: DiffResult, output_path: Union[str, Path], **kwargs: Any) -> None:
    """Render a diff result to a JSON file.

    Parameters
    ----------
    diff : DiffResult
        Comparison result to serialize.
    output_path : str or Path
        Destination path for the generated JSON file.
    **kwargs
        Additional keyword arguments forwarded to :class:`JsonDiffRenderer`.

    """
    renderer = JsonDiffRenderer(**kwargs)
    json_output = renderer.render(diff)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_output)
