#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/normalize/__init__.py
"""Normalization applied to inputs before they are compared.

Line normalization (whitespace collapsing, case folding) maps each line to a
comparison key. Structural normalization (JSON key order, XML attribute
order) rewrites a whole document before it is split into lines.

Examples
--------
    >>> from diffview.normalize import normalize_document
    >>> from diffview.options import DiffOptions
    >>> normalize_document('{"b": 2, "a": 1}', "json", DiffOptions(ignore_key_order=True))
    '{\\n  "a": 1,\\n  "b": 2\\n}'

"""

from diffview.normalize.api import normalize_document, normalize_pair
from diffview.normalize.json_tree import parse_json_tree, serialize_json_tree, sort_json_keys, sort_json_tree
from diffview.normalize.text import fold_case, normalize_line, normalize_lines, normalize_whitespace
from diffview.normalize.xml_tree import parse_xml_tree, serialize_xml_tree, sort_xml_attributes, sort_xml_tree

__all__ = [
    "fold_case",
    "normalize_document",
    "normalize_line",
    "normalize_lines",
    "normalize_pair",
    "normalize_whitespace",
    "parse_json_tree",
    "parse_xml_tree",
    "serialize_json_tree",
    "serialize_xml_tree",
    "sort_json_keys",
    "sort_json_tree",
    "sort_xml_attributes",
    "sort_xml_tree",
]
