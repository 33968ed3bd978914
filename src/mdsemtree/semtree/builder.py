"""Build a nested semantic tree from a flat sequence of blocks."""

import dataclasses
import logging
from typing import Optional

from ..config import SemtreeOptions
from ..nodes import Heading, List, ListItem, Node, Root, has_children

logger = logging.getLogger(__name__)

MAX_DEPTH = 6

HEADING = "heading"
LIST = "list"
CONTENT = "content"


def clamp_depth(depth: Optional[int]) -> int:
    """Clamp a heading depth into 1-6; a missing depth counts as 6."""
    if depth is None:
        return MAX_DEPTH
    clamped = min(max(depth, 1), MAX_DEPTH)
    if clamped != depth:
        logger.debug("Clamped heading depth %s to %s", depth, clamped)
    return clamped


class HeadingStack:
    """
    Tracks the nearest-ancestor container for each heading level.

    Slot ``level - 1`` holds the container that content at that level
    attaches to. Every slot starts out as the root.
    """

    def __init__(self, root: Root):
        self.root = root
        self.slots: list[Node] = [root] * MAX_DEPTH
        self.current_level = 1

    def parent_for(self, depth: int) -> Node:
        """Find the container for a new heading: the nearest shallower heading, or root."""
        for level in range(depth - 1, 0, -1):
            container = self.slots[level - 1]
            if container is not self.root:
                return container
        return self.root

    def push(self, heading: Heading) -> None:
        """Make heading the container for its level and every deeper level."""
        depth = clamp_depth(heading.depth)
        for level in range(depth, MAX_DEPTH + 1):
            self.slots[level - 1] = heading
        self.current_level = depth

    @property
    def current(self) -> Node:
        """Container for content at the most recently seen heading level."""
        return self.slots[self.current_level - 1]


def classify_node(node: Node, options: SemtreeOptions) -> str:
    """Classify a block as heading, list, or other content."""
    if isinstance(node, Heading):
        return HEADING
    if isinstance(node, List) and options.preserve_list_structure:
        return LIST
    return CONTENT


def _clone_heading(node: Heading) -> Heading:
    return Heading(depth=clamp_depth(node.depth), children=list(node.children or []))


def _clone_list(node: List) -> List:
    items = [
        dataclasses.replace(item, children=list(item.children)) if isinstance(item, ListItem) else item
        for item in node.children
    ]
    return dataclasses.replace(node, children=items)


def _clone_content(node: Node) -> Node:
    if has_children(node):
        return dataclasses.replace(node, children=list(node.children))
    return dataclasses.replace(node)


def build_semantic_tree(tree: Root, options: Optional[SemtreeOptions] = None) -> Root:
    """
    Nest a flat document under its headings.

    Each heading becomes a child of the nearest preceding heading with a
    smaller depth (or of the root), and every other block becomes a child of
    the most recent heading. Content before the first heading stays on the
    root. The input tree is not modified.
    """
    options = options or SemtreeOptions()
    new_root = Root()
    stack = HeadingStack(new_root)

    for node in tree.children:
        kind = classify_node(node, options)
        if kind == HEADING:
            heading = _clone_heading(node)
            stack.parent_for(heading.depth).children.append(heading)
            stack.push(heading)
        elif kind == LIST:
            stack.current.children.append(_clone_list(node))
        else:
            stack.current.children.append(_clone_content(node))

    logger.debug("Built semantic tree with %d top-level nodes", len(new_root.children))
    return new_root
