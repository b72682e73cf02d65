#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/normalize/xml_tree.py
"""XML attribute-order normalization over a tagged document tree.

Documents are parsed with ``defusedxml`` (entity expansion and external
references are refused) and converted into a small tree of node kinds:

- ``XmlElement``: tag, attributes, children
- ``XmlText``: character data
- ``XmlCData``: a CDATA section payload
- ``XmlComment``: comment payload
- ``XmlProcessingInstruction``: target and data
- ``XmlDoctype``: the serialized document type declaration

Sorting rewrites every element's attribute list ordered by attribute name.
Element order, text, comments and CDATA payloads are left as they are.
Serialization puts one node per line with nested indentation; whitespace-only
text between elements is treated as layout and dropped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union
from xml.dom import Node as DomNode
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

import defusedxml.minidom
from defusedxml import DefusedXmlException

from diffview.constants import DEFAULT_STRUCTURE_INDENT, MAX_TREE_DEPTH
from diffview.exceptions import NormalizationError

logger = logging.getLogger(__name__)

_DECLARATION_RE = re.compile(r"^\s*(<\?xml\s[^>]*\?>)")


@dataclass(frozen=True)
class XmlText:
    """Character data."""

    data: str


@dataclass(frozen=True)
class XmlCData:
    """CDATA section payload, serialized verbatim."""

    data: str


@dataclass(frozen=True)
class XmlComment:
    """Comment payload, serialized verbatim."""

    data: str


@dataclass(frozen=True)
class XmlProcessingInstruction:
    """Processing instruction inside the document."""

    target: str
    data: str


@dataclass(frozen=True)
class XmlDoctype:
    """Document type declaration kept as written by the DOM."""

    raw: str


@dataclass(frozen=True)
class XmlElement:
    """Element with attributes in document (or sorted) order."""

    tag: str
    attributes: tuple[tuple[str, str], ...]
    children: tuple[XmlNode, ...]


XmlNode = Union[XmlElement, XmlText, XmlCData, XmlComment, XmlProcessingInstruction, XmlDoctype]


@dataclass(frozen=True)
class XmlDocument:
    """Top-level nodes plus the XML declaration, if the source had one."""

    declaration: str | None
    children: tuple[XmlNode, ...]


def _convert(node: DomNode, depth: int) -> XmlNode | None:
    if depth > MAX_TREE_DEPTH:
        raise NormalizationError(f"XML nesting exceeds {MAX_TREE_DEPTH} levels", format_name="xml")

    node_type = node.nodeType
    if node_type == DomNode.ELEMENT_NODE:
        children = []
        for child in node.childNodes:
            converted = _convert(child, depth + 1)
            if converted is not None:
                children.append(converted)
        return XmlElement(
            tag=node.tagName,
            attributes=tuple(node.attributes.items()),
            children=tuple(children),
        )
    if node_type == DomNode.TEXT_NODE:
        return XmlText(node.data)
    if node_type == DomNode.CDATA_SECTION_NODE:
        return XmlCData(node.data)
    if node_type == DomNode.COMMENT_NODE:
        return XmlComment(node.data)
    if node_type == DomNode.PROCESSING_INSTRUCTION_NODE:
        return XmlProcessingInstruction(node.target, node.data)
    if node_type == DomNode.DOCUMENT_TYPE_NODE:
        return XmlDoctype(node.toxml().strip())

    logger.debug(f"Skipping unsupported DOM node type {node_type}")
    return None


def parse_xml_tree(text: str) -> XmlDocument:
    """Parse XML text into a tagged tree.

    Parameters
    ----------
    text : str
        XML document

    Returns
    -------
    XmlDocument
        Declaration and top-level nodes

    Raises
    ------
    NormalizationError
        If the document is malformed, uses forbidden constructs (entity
        declarations, external references) or nests too deeply

    """
    try:
        dom = defusedxml.minidom.parseString(text)
    except (ExpatError, DefusedXmlException, ValueError) as e:
        raise NormalizationError(f"Invalid XML: {e}", format_name="xml", original_error=e) from e

    # The DOM is not unlink()ed: unlink recurses once per nesting level
    try:
        children = []
        for child in dom.childNodes:
            converted = _convert(child, 0)
            if converted is not None:
                children.append(converted)
    except RecursionError as e:
        raise NormalizationError("XML document is nested too deeply", format_name="xml", original_error=e) from e

    match = _DECLARATION_RE.match(text)
    return XmlDocument(declaration=match.group(1) if match else None, children=tuple(children))


def _sort_node(node: XmlNode) -> XmlNode:
    if not isinstance(node, XmlElement):
        return node
    return XmlElement(
        tag=node.tag,
        attributes=tuple(sorted(node.attributes, key=lambda attr: attr[0])),
        children=tuple(_sort_node(child) for child in node.children),
    )


def sort_xml_tree(document: XmlDocument) -> XmlDocument:
    """Return a copy of ``document`` with every element's attributes sorted by name."""
    return XmlDocument(
        declaration=document.declaration,
        children=tuple(_sort_node(child) for child in document.children),
    )


def _escape_attribute(value: str) -> str:
    return escape(value, {'"': "&quot;", "\n": "&#10;", "\t": "&#9;"})


def _format_attributes(attributes: tuple[tuple[str, str], ...]) -> str:
    return "".join(f' {name}="{_escape_attribute(value)}"' for name, value in attributes)


def _format_inline(node: XmlNode) -> str:
    if isinstance(node, XmlText):
        return escape(node.data)
    if isinstance(node, XmlCData):
        return f"<![CDATA[{node.data}]]>"
    if isinstance(node, XmlComment):
        return f"<!--{node.data}-->"
    if isinstance(node, XmlProcessingInstruction):
        return f"<?{node.target} {node.data}?>" if node.data else f"<?{node.target}?>"
    if isinstance(node, XmlDoctype):
        return node.raw
    raise TypeError(f"Element nodes are not inline: {node!r}")


def _is_layout_text(node: XmlNode) -> bool:
    return isinstance(node, XmlText) and not node.data.strip()


def _serialize(node: XmlNode, indent: int, level: int, out: list[str]) -> None:
    pad = " " * (indent * level)

    if not isinstance(node, XmlElement):
        if isinstance(node, XmlText):
            # Mixed content: only the run's surrounding whitespace is dropped
            out.append(pad + escape(node.data.strip()))
        else:
            out.append(pad + _format_inline(node))
        return

    attrs = _format_attributes(node.attributes)
    if not node.children:
        out.append(f"{pad}<{node.tag}{attrs}/>")
        return

    # Character data only: keep it on the element's line, untouched
    if all(isinstance(child, (XmlText, XmlCData)) for child in node.children):
        body = "".join(_format_inline(child) for child in node.children)
        out.append(f"{pad}<{node.tag}{attrs}>{body}</{node.tag}>")
        return

    out.append(f"{pad}<{node.tag}{attrs}>")
    for child in node.children:
        if _is_layout_text(child):
            continue
        _serialize(child, indent, level + 1, out)
    out.append(f"{pad}</{node.tag}>")


def serialize_xml_tree(document: XmlDocument, indent: int = DEFAULT_STRUCTURE_INDENT) -> str:
    """Serialize a tree to XML text, one node per line."""
    lines: list[str] = []
    if document.declaration:
        lines.append(document.declaration)
    for child in document.children:
        if _is_layout_text(child):
            continue
        _serialize(child, indent, 0, lines)
    return "\n".join(lines)


def sort_xml_attributes(text: str, indent: int = DEFAULT_STRUCTURE_INDENT) -> str:
    """Rewrite an XML document with every element's attributes sorted by name.

    Parameters
    ----------
    text : str
        XML document
    indent : int, default 2
        Spaces per nesting level in the output

    Returns
    -------
    str
        Re-serialized document

    Raises
    ------
    NormalizationError
        If the document cannot be parsed

    Examples
    --------
        >>> sort_xml_attributes('<root b="2" a="1"/>')
        '<root a="1" b="2"/>'

    """
    document = parse_xml_tree(text)
    try:
        return serialize_xml_tree(sort_xml_tree(document), indent=indent)
    except RecursionError as e:
        raise NormalizationError("XML document is nested too deeply", format_name="xml", original_error=e) from e
