"""Document tree node types.

Every node kind is its own dataclass carrying a fixed ``type`` tag that uses
the mdast names, so trees serialize to (and load from) the JSON shape other
markdown tooling produces.
"""

from dataclasses import dataclass, field, asdict
from typing import Iterator, Optional, Union


@dataclass
class Text:
    """A leaf holding a raw string value."""
    value: str
    type: str = field(default="text", init=False)


@dataclass
class InlineCode:
    value: str
    type: str = field(default="inlineCode", init=False)


@dataclass
class Delimiter:
    """A single sentence-ending punctuation character."""
    value: str
    type: str = field(default="sentenceDelimiter", init=False)


@dataclass
class Sentence:
    """A sentence span: its text followed by a Delimiter leaf."""
    children: list["InlineNode"] = field(default_factory=list)
    type: str = field(default="sentence", init=False)


@dataclass
class Emphasis:
    children: list["InlineNode"] = field(default_factory=list)
    type: str = field(default="emphasis", init=False)


@dataclass
class Strong:
    children: list["InlineNode"] = field(default_factory=list)
    type: str = field(default="strong", init=False)


@dataclass
class Heading:
    """A heading of depth 1-6.

    In a flat document tree its children are inline nodes. In a semantic
    tree the heading also owns the blocks (and deeper headings) under it.
    """
    depth: int
    children: list["Node"] = field(default_factory=list)
    type: str = field(default="heading", init=False)


@dataclass
class Paragraph:
    children: list["InlineNode"] = field(default_factory=list)
    type: str = field(default="paragraph", init=False)


@dataclass
class Code:
    value: str
    lang: Optional[str] = None
    type: str = field(default="code", init=False)


@dataclass
class Blockquote:
    children: list["BlockNode"] = field(default_factory=list)
    type: str = field(default="blockquote", init=False)


@dataclass
class ThematicBreak:
    type: str = field(default="thematicBreak", init=False)


@dataclass
class ListItem:
    children: list["BlockNode"] = field(default_factory=list)
    type: str = field(default="listItem", init=False)


@dataclass
class List:
    children: list[ListItem] = field(default_factory=list)
    ordered: bool = False
    start: Optional[int] = None
    type: str = field(default="list", init=False)


@dataclass
class Root:
    children: list["Node"] = field(default_factory=list)
    type: str = field(default="root", init=False)


InlineNode = Union[Text, InlineCode, Emphasis, Strong, Sentence, Delimiter]
BlockNode = Union[Heading, Paragraph, Code, Blockquote, ThematicBreak, List, ListItem]
Node = Union[Root, BlockNode, InlineNode]

INLINE_TYPES = (Text, InlineCode, Emphasis, Strong, Sentence, Delimiter)
BLOCK_TYPES = (Heading, Paragraph, Code, Blockquote, ThematicBreak, List, ListItem)

_NODE_CLASSES = {
    cls.__dataclass_fields__["type"].default: cls
    for cls in (Root,) + BLOCK_TYPES + INLINE_TYPES
}


def has_children(node: Node) -> bool:
    """Check whether a node kind is a container."""
    return hasattr(node, "children")


def iter_nodes(node: Node) -> Iterator[Node]:
    """Walk a tree depth-first, pre-order."""
    yield node
    for child in getattr(node, "children", ()):
        yield from iter_nodes(child)


def text_content(node: Node) -> str:
    """Concatenate the values of a node's direct Text children."""
    return "".join(
        child.value for child in getattr(node, "children", ()) if isinstance(child, Text)
    )


def node_to_dict(node: Node) -> dict:
    """Serialize a tree to plain dicts."""
    return asdict(node)


def node_from_dict(data: dict) -> Node:
    """
    Build a tree from a generic mdast-shaped dict.

    Containers missing ``children`` get an empty list and a heading missing
    ``depth`` is treated as depth 6. Unknown node types raise ValueError.
    """
    node_type = data.get("type")
    cls = _NODE_CLASSES.get(node_type)
    if cls is None:
        raise ValueError(f"Unknown node type: {node_type!r}")

    kwargs = {}
    if "children" in cls.__dataclass_fields__:
        kwargs["children"] = [node_from_dict(child) for child in data.get("children") or []]
    if cls is Heading:
        kwargs["depth"] = data.get("depth") or 6
    elif cls is Code:
        kwargs["value"] = data.get("value", "")
        kwargs["lang"] = data.get("lang")
    elif cls is List:
        kwargs["ordered"] = bool(data.get("ordered", False))
        kwargs["start"] = data.get("start")
    elif "value" in cls.__dataclass_fields__:
        kwargs["value"] = data.get("value", "")

    return cls(**kwargs)
