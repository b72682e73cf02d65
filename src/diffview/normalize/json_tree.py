#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/normalize/json_tree.py
"""JSON key-order normalization over a tagged document tree.

A JSON document is parsed into three node kinds:

- ``JsonObject``: ordered ``(key, value)`` members, duplicates kept
- ``JsonArray``: ordered items
- ``JsonScalar``: a leaf holding its serialized token

Numbers keep their source token (``1.50`` stays ``1.50``) so sorting never
changes how a value is written. Sorting rebuilds every object with its
members ordered by key and leaves array order alone.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from diffview.constants import DEFAULT_STRUCTURE_INDENT, MAX_TREE_DEPTH
from diffview.exceptions import NormalizationError


@dataclass(frozen=True)
class JsonScalar:
    """Leaf value (string, number, boolean or null) stored as its JSON token."""

    token: str


@dataclass(frozen=True)
class JsonArray:
    """Ordered sequence of child nodes."""

    items: tuple[JsonNode, ...]


@dataclass(frozen=True)
class JsonObject:
    """Object members in document order."""

    members: tuple[tuple[str, JsonNode], ...]


JsonNode = Union[JsonObject, JsonArray, JsonScalar]


class _RawToken(str):
    """Marks a number or constant whose source spelling must be kept."""


class _Pairs(list):
    """Marks an object parsed through ``object_pairs_hook``."""


def _build(value: Any, depth: int) -> JsonNode:
    if depth > MAX_TREE_DEPTH:
        raise NormalizationError(f"JSON nesting exceeds {MAX_TREE_DEPTH} levels", format_name="json")

    if isinstance(value, _Pairs):
        return JsonObject(members=tuple((key, _build(child, depth + 1)) for key, child in value))
    if isinstance(value, list):
        return JsonArray(items=tuple(_build(child, depth + 1) for child in value))
    if isinstance(value, _RawToken):
        return JsonScalar(token=str(value))
    return JsonScalar(token=json.dumps(value, ensure_ascii=False))


def parse_json_tree(text: str) -> JsonNode:
    """Parse JSON text into a tagged tree.

    Parameters
    ----------
    text : str
        JSON document

    Returns
    -------
    JsonNode
        Root node of the document

    Raises
    ------
    NormalizationError
        If the text is not valid JSON or nests deeper than ``MAX_TREE_DEPTH``

    """
    try:
        parsed = json.loads(
            text,
            object_pairs_hook=_Pairs,
            parse_float=_RawToken,
            parse_int=_RawToken,
            parse_constant=_RawToken,
        )
    except (ValueError, RecursionError) as e:
        raise NormalizationError(f"Invalid JSON: {e}", format_name="json", original_error=e) from e

    try:
        return _build(parsed, 0)
    except RecursionError as e:
        raise NormalizationError("JSON document is nested too deeply", format_name="json", original_error=e) from e


def sort_json_tree(node: JsonNode) -> JsonNode:
    """Return a copy of ``node`` with every object's members sorted by key.

    The sort is stable, so duplicate keys keep their relative order.
    """
    if isinstance(node, JsonObject):
        members = sorted(node.members, key=lambda member: member[0])
        return JsonObject(members=tuple((key, sort_json_tree(child)) for key, child in members))
    if isinstance(node, JsonArray):
        return JsonArray(items=tuple(sort_json_tree(child) for child in node.items))
    return node


def _serialize(node: JsonNode, indent: int, level: int, out: list[str], prefix: str) -> None:
    pad = " " * (indent * level)

    if isinstance(node, JsonScalar):
        out.append(f"{pad}{prefix}{node.token}")
        return

    if isinstance(node, JsonObject):
        if not node.members:
            out.append(f"{pad}{prefix}{{}}")
            return
        out.append(f"{pad}{prefix}{{")
        for index, (key, child) in enumerate(node.members):
            _serialize(child, indent, level + 1, out, f"{json.dumps(key, ensure_ascii=False)}: ")
            if index < len(node.members) - 1:
                out[-1] += ","
        out.append(f"{pad}}}")
        return

    if not node.items:
        out.append(f"{pad}{prefix}[]")
        return
    out.append(f"{pad}{prefix}[")
    for index, child in enumerate(node.items):
        _serialize(child, indent, level + 1, out, "")
        if index < len(node.items) - 1:
            out[-1] += ","
    out.append(f"{pad}]")


def serialize_json_tree(node: JsonNode, indent: int = DEFAULT_STRUCTURE_INDENT) -> str:
    """Serialize a tree to JSON text, one member or item per line."""
    lines: list[str] = []
    _serialize(node, indent, 0, lines, "")
    return "\n".join(lines)


def sort_json_keys(text: str, indent: int = DEFAULT_STRUCTURE_INDENT) -> str:
    """Rewrite a JSON document with all object keys sorted.

    Parameters
    ----------
    text : str
        JSON document
    indent : int, default 2
        Spaces per nesting level in the output

    Returns
    -------
    str
        Re-serialized document with sorted keys

    Raises
    ------
    NormalizationError
        If the document cannot be parsed

    Examples
    --------
        >>> print(sort_json_keys('{"b": 2, "a": 1}'))
        {
          "a": 1,
          "b": 2
        }

    """
    tree = parse_json_tree(text)
    try:
        return serialize_json_tree(sort_json_tree(tree), indent=indent)
    except RecursionError as e:
        raise NormalizationError("JSON document is nested too deeply", format_name="json", original_error=e) from e
