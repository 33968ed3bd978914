"""MCP tool implementations."""

from .segment import segment_sentences, render_html
from .outline import get_semantic_tree, get_heading_content, get_subtree

__all__ = [
    "segment_sentences",
    "render_html",
    "get_semantic_tree",
    "get_heading_content",
    "get_subtree",
]
