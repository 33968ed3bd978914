"""Presentational output tree: conversion from document trees and HTML output."""

import html
from dataclasses import dataclass, field, asdict
from typing import Union

from . import nodes as md

VOID_ELEMENTS = {"hr", "br", "img"}


@dataclass
class HastText:
    value: str
    type: str = field(default="text", init=False)


@dataclass
class HastDelimiter:
    """A sentence delimiter that survived conversion without a wrapper."""
    value: str
    type: str = field(default="sentenceDelimiter", init=False)


@dataclass
class Element:
    tag_name: str
    properties: dict = field(default_factory=dict)
    children: list["HastNode"] = field(default_factory=list)
    type: str = field(default="element", init=False)

    @property
    def class_names(self) -> list[str]:
        return list(self.properties.get("className", []))


@dataclass
class HastRoot:
    children: list["HastNode"] = field(default_factory=list)
    type: str = field(default="root", init=False)


HastNode = Union[HastRoot, Element, HastText, HastDelimiter]


def span(children: list, class_name: str = "") -> Element:
    """Build a span, optionally carrying one style class."""
    properties = {"className": [class_name]} if class_name else {}
    return Element("span", properties, children)


def _convert_all(children: list) -> list:
    result = []
    for child in children:
        result.extend(_convert(child))
    return result


def _convert(node) -> list:
    if isinstance(node, md.Text):
        return [HastText(node.value)]
    if isinstance(node, md.Delimiter):
        return [HastDelimiter(node.value)]
    if isinstance(node, md.Sentence):
        return [span(_convert_all(node.children), "sentence")]
    if isinstance(node, md.InlineCode):
        return [Element("code", {}, [HastText(node.value)])]
    if isinstance(node, md.Emphasis):
        return [Element("em", {}, _convert_all(node.children))]
    if isinstance(node, md.Strong):
        return [Element("strong", {}, _convert_all(node.children))]
    if isinstance(node, md.Paragraph):
        return [Element("p", {}, _convert_all(node.children))]
    if isinstance(node, md.Heading):
        depth = min(max(node.depth, 1), 6)
        inline = [c for c in node.children if isinstance(c, md.INLINE_TYPES)]
        blocks = [c for c in node.children if not isinstance(c, md.INLINE_TYPES)]
        heading = Element(f"h{depth}", {}, _convert_all(inline))
        if not blocks:
            return [heading]
        # Semantic tree heading owning its content
        return [Element("section", {}, [heading] + _convert_all(blocks))]
    if isinstance(node, md.Code):
        properties = {"className": [f"language-{node.lang}"]} if node.lang else {}
        return [Element("pre", {}, [Element("code", properties, [HastText(node.value)])])]
    if isinstance(node, md.Blockquote):
        return [Element("blockquote", {}, _convert_all(node.children))]
    if isinstance(node, md.ThematicBreak):
        return [Element("hr")]
    if isinstance(node, md.List):
        properties = {}
        if node.ordered and node.start not in (None, 1):
            properties["start"] = node.start
        return [Element("ol" if node.ordered else "ul", properties, _convert_all(node.children))]
    if isinstance(node, md.ListItem):
        return [Element("li", {}, _convert_all(node.children))]
    if isinstance(node, md.Root):
        return _convert_all(node.children)
    raise TypeError(f"Cannot convert node: {type(node).__name__}")


def to_hast(tree: md.Root) -> HastRoot:
    """Convert a document tree to an output tree."""
    return HastRoot(children=_convert_all(tree.children))


def _render_properties(properties: dict) -> str:
    parts = []
    for name, value in properties.items():
        if name == "className":
            name = "class"
            value = " ".join(value)
        parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


_BLOCK_TAGS = {"p", "h1", "h2", "h3", "h4", "h5", "h6", "pre", "blockquote",
               "ul", "ol", "li", "hr", "section"}


def to_html(node: HastNode) -> str:
    """Serialize an output tree to an HTML string."""
    if isinstance(node, (HastText, HastDelimiter)):
        return html.escape(node.value, quote=False)
    if isinstance(node, HastRoot):
        return "\n".join(to_html(child) for child in node.children)
    attrs = _render_properties(node.properties)
    if node.tag_name in VOID_ELEMENTS:
        return f"<{node.tag_name}{attrs}>"
    block_children = any(
        isinstance(child, Element) and child.tag_name in _BLOCK_TAGS for child in node.children
    )
    separator = "\n" if block_children else ""
    inner = separator.join(to_html(child) for child in node.children)
    if block_children:
        inner = f"\n{inner}\n"
    return f"<{node.tag_name}{attrs}>{inner}</{node.tag_name}>"


def hast_to_dict(node: HastNode) -> dict:
    return asdict(node)


def hast_from_dict(data: dict) -> HastNode:
    """Build an output tree from dicts, accepting ``tagName`` or ``tag_name``."""
    node_type = data.get("type")
    if node_type == "text":
        return HastText(data.get("value", ""))
    if node_type == "sentenceDelimiter":
        return HastDelimiter(data.get("value", ""))
    children = [hast_from_dict(child) for child in data.get("children") or []]
    if node_type == "root":
        return HastRoot(children=children)
    if node_type == "element":
        tag_name = data.get("tag_name") or data.get("tagName")
        return Element(tag_name, dict(data.get("properties") or {}), children)
    raise ValueError(f"Unknown output node type: {node_type!r}")
