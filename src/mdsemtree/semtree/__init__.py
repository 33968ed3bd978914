"""Heading-based semantic tree building."""

from .builder import build_semantic_tree, HeadingStack, classify_node
from .lookup import extract_heading_content, create_subtree, find_heading

__all__ = [
    "build_semantic_tree",
    "HeadingStack",
    "classify_node",
    "extract_heading_content",
    "create_subtree",
    "find_heading",
]
