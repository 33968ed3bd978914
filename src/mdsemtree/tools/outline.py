"""Tools for semantic tree building and heading lookup."""

import logging
from typing import Optional

from ..config import SemtreeOptions
from ..nodes import Heading, iter_nodes, node_to_dict
from ..parser.markdown import parse_markdown
from ..semtree.builder import build_semantic_tree
from ..semtree.lookup import create_subtree, extract_heading_content, find_heading

logger = logging.getLogger(__name__)


def _options(preserve_list_structure: Optional[bool]) -> SemtreeOptions:
    """Explicit arguments win over MDSEMTREE_* environment settings."""
    if preserve_list_structure is None:
        return SemtreeOptions.from_env()
    return SemtreeOptions(preserve_list_structure=preserve_list_structure)


def get_semantic_tree(content: str, preserve_list_structure: Optional[bool] = None) -> dict:
    """
    Nest a markdown document under its headings.

    Args:
        content: Markdown source
        preserve_list_structure: Copy lists as atomic units (defaults to
            MDSEMTREE_PRESERVE_LISTS, or true)

    Returns:
        Dict with the semantic tree and heading count
    """
    tree = build_semantic_tree(parse_markdown(content), _options(preserve_list_structure))
    heading_count = sum(1 for node in iter_nodes(tree) if isinstance(node, Heading))
    return {
        "heading_count": heading_count,
        "tree": node_to_dict(tree),
    }


def get_heading_content(content: str, heading: str) -> dict:
    """
    Get the blocks that belong to a heading.

    Args:
        content: Markdown source
        heading: Exact heading text

    Returns:
        Dict with the heading's content nodes, or an error
    """
    tree = build_semantic_tree(parse_markdown(content), _options(None))
    if find_heading(tree, heading) is None:
        return {"error": f"Heading not found: {heading}"}

    nodes = extract_heading_content(tree, heading)
    return {
        "heading": heading,
        "content": [node_to_dict(node) for node in nodes],
    }


def get_subtree(content: str, heading: str) -> dict:
    """
    Get a heading and everything nested under it as a standalone tree.

    Args:
        content: Markdown source
        heading: Exact heading text

    Returns:
        Dict with the subtree, or an error
    """
    subtree = create_subtree(build_semantic_tree(parse_markdown(content), _options(None)), heading)
    if not subtree.children:
        logger.info("No heading matched %r", heading)
        return {"error": f"Heading not found: {heading}"}
    return {"heading": heading, "tree": node_to_dict(subtree)}
