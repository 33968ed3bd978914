"""Wrap sentence boundaries of an output tree in styled spans."""

import dataclasses
import logging

from ..hast import Element, HastDelimiter, HastNode, HastRoot, HastText, span
from .matcher import SEPARATOR, has_delimiter, split_text

logger = logging.getLogger(__name__)

SENTENCE_CLASS = "sentence"
DELIMITER_CLASS = "sentence-delimiter"

# Elements whose direct text children are re-scanned for boundaries
PARAGRAPH_TAGS = {"p"}


def _wrap_delimiters(node: HastNode) -> HastNode:
    """First pass: replace delimiter nodes with delimiter spans."""
    if isinstance(node, HastDelimiter):
        return span([HastText(node.value)], DELIMITER_CLASS)
    if isinstance(node, Element):
        return dataclasses.replace(
            node,
            properties=dict(node.properties),
            children=[_wrap_delimiters(c) for c in node.children],
        )
    if isinstance(node, HastRoot):
        return HastRoot(children=[_wrap_delimiters(c) for c in node.children])
    return dataclasses.replace(node)


def sentence_elements(text: str) -> list[HastNode]:
    """
    Build sentence spans for a raw string.

    Returns an empty list when the string holds no sentence boundary.
    """
    matches, remainder = split_text(text)
    if not matches:
        return []

    result: list[HastNode] = []
    for match in matches:
        children: list[HastNode] = [HastText(match.text)] if match.text else []
        children.append(span([HastText(match.delimiter)], DELIMITER_CLASS))
        result.append(span(children, SENTENCE_CLASS))
        if match.has_separator:
            result.append(span([HastText(SEPARATOR)]))
    if remainder:
        result.append(span([HastText(remainder)]))
    return result


def _wrap_paragraph_text(children: list[HastNode]) -> list[HastNode]:
    new_children: list[HastNode] = []
    for child in children:
        if isinstance(child, HastText) and has_delimiter(child.value):
            wrapped = sentence_elements(child.value)
            if wrapped:
                new_children.extend(wrapped)
                continue
        new_children.append(child)
    return new_children


def _wrap_raw_sentences(node: HastNode) -> HastNode:
    """Second pass: wrap boundaries in raw text sitting directly in paragraphs."""
    if not isinstance(node, (Element, HastRoot)):
        return node
    if isinstance(node, Element) and (
        SENTENCE_CLASS in node.class_names or DELIMITER_CLASS in node.class_names
    ):
        # Already wrapped
        return node

    children = [_wrap_raw_sentences(child) for child in node.children]
    if isinstance(node, Element) and node.tag_name in PARAGRAPH_TAGS:
        children = _wrap_paragraph_text(children)
    return dataclasses.replace(node, children=children)


def annotate_sentences(tree: HastRoot) -> HastRoot:
    """
    Return a copy of an output tree with sentence boundaries wrapped in spans.

    Delimiter nodes kept from sentence splitting become
    ``<span class="sentence-delimiter">``. Raw paragraph text that still holds
    sentence boundaries (because the conversion dropped the sentence nodes)
    is re-scanned and wrapped in ``<span class="sentence">`` spans. Spans
    already carrying either class are never wrapped again.
    """
    logger.debug("Annotating output tree with %d top-level nodes", len(tree.children))
    return _wrap_raw_sentences(_wrap_delimiters(tree))
