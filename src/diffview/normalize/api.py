#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/normalize/api.py
"""Best-effort structural normalization of whole documents.

Structural normalization is an enhancement, never a precondition: when a
document cannot be parsed the original text is returned unchanged and the
comparison proceeds as plain text.
"""

from __future__ import annotations

import logging

from diffview.constants import DEFAULT_STRUCTURE_INDENT, STRUCTURED_FORMATS, DiffFormat
from diffview.exceptions import NormalizationError
from diffview.normalize.json_tree import sort_json_keys
from diffview.normalize.xml_tree import sort_xml_attributes
from diffview.options import DiffOptions

logger = logging.getLogger(__name__)


def normalize_document(
    text: str,
    fmt: DiffFormat,
    options: DiffOptions,
    indent: int = DEFAULT_STRUCTURE_INDENT,
) -> str:
    """Apply key/attribute-order normalization to one document.

    Parameters
    ----------
    text : str
        Document text
    fmt : {"text", "json", "xml"}
        Declared format of the document
    options : DiffOptions
        Comparison options; only ``ignore_key_order`` is consulted here
    indent : int, default 2
        Indentation for the re-serialized document

    Returns
    -------
    str
        Normalized text, or ``text`` itself when normalization is disabled,
        not applicable to ``fmt``, or fails

    """
    if not options.ignore_key_order or fmt not in STRUCTURED_FORMATS:
        return text

    try:
        if fmt == "json":
            return sort_json_keys(text, indent=indent)
        return sort_xml_attributes(text, indent=indent)
    except NormalizationError as e:
        logger.warning(f"Could not normalize {e.format_name.upper()} document, comparing as text: {e.message}")
        return text


def normalize_pair(
    left: str,
    right: str,
    left_format: DiffFormat,
    right_format: DiffFormat,
    options: DiffOptions,
    indent: int = DEFAULT_STRUCTURE_INDENT,
) -> tuple[str, str]:
    """Normalize both sides of a comparison.

    Structural normalization only makes sense when both sides declare the
    same structured format; otherwise both texts are returned unchanged.

    Returns
    -------
    tuple of (str, str)
        Normalized left and right text

    """
    if left_format != right_format:
        logger.debug(f"Skipping structural normalization for {left_format!r} vs {right_format!r}")
        return left, right

    return (
        normalize_document(left, left_format, options, indent=indent),
        normalize_document(right, right_format, options, indent=indent),
    )
