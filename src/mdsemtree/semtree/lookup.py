"""Find headings in a semantic tree by their text."""

import copy
from typing import Optional

from ..nodes import INLINE_TYPES, Heading, Node, Root, iter_nodes, text_content


def find_heading(tree: Node, heading_text: str) -> Optional[Heading]:
    """Return the first heading (pre-order) whose text equals heading_text exactly."""
    for node in iter_nodes(tree):
        if isinstance(node, Heading) and text_content(node) == heading_text:
            return node
    return None


def extract_heading_content(tree: Node, heading_text: str) -> list[Node]:
    """
    Get the content that belongs to a heading.

    Returns the heading's block children other than sub-headings. The
    heading's own inline text is not included. Empty if no heading matches.
    """
    heading = find_heading(tree, heading_text)
    if heading is None:
        return []
    return [
        child for child in heading.children
        if not isinstance(child, Heading) and not isinstance(child, INLINE_TYPES)
    ]


def create_subtree(tree: Node, heading_text: str) -> Root:
    """Return a root holding a copy of the first matching heading and its subtree."""
    heading = find_heading(tree, heading_text)
    if heading is None:
        return Root()
    return Root(children=[copy.deepcopy(heading)])
