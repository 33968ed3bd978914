"""Tools for sentence segmentation and HTML rendering."""

import logging

from ..hast import hast_to_dict, to_hast, to_html
from ..nodes import node_to_dict
from ..parser.markdown import parse_markdown
from ..sentence.annotate import annotate_sentences
from ..sentence.splitter import count_sentences, split_sentences

logger = logging.getLogger(__name__)


def segment_sentences(content: str) -> dict:
    """
    Split the prose of a markdown document into sentences.

    Args:
        content: Markdown source

    Returns:
        Dict with the segmented document tree and its sentence count
    """
    tree = split_sentences(parse_markdown(content))
    sentence_count = count_sentences(tree)
    logger.info("Segmented document into %d sentences", sentence_count)
    return {
        "sentence_count": sentence_count,
        "tree": node_to_dict(tree),
    }


def render_html(content: str, split: bool = True, include_tree: bool = False) -> dict:
    """
    Render a markdown document to HTML with sentence spans.

    Args:
        content: Markdown source
        split: Split sentences on the document tree before conversion. When
            False, boundaries are found by re-scanning paragraph text.
        include_tree: Also return the annotated output tree

    Returns:
        Dict with the HTML string (and optionally the output tree)
    """
    tree = parse_markdown(content)
    if split:
        tree = split_sentences(tree)
    output = annotate_sentences(to_hast(tree))

    result = {"html": to_html(output)}
    if include_tree:
        result["tree"] = hast_to_dict(output)
    return result
