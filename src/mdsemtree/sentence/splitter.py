"""Split Text leaves of a document tree into Sentence nodes."""

import copy
import dataclasses
import logging

from ..nodes import Delimiter, Node, Root, Sentence, Text, has_children
from .matcher import SEPARATOR, has_delimiter, split_text

logger = logging.getLogger(__name__)


def segment_text_node(node: Text) -> list[Node]:
    """
    Segment one Text leaf into sentence nodes.

    Produces Sentence nodes (sentence text plus a Delimiter leaf), a single
    separator Text after any sentence followed by whitespace, and a trailing
    Text for a partial sentence. A leaf without a valid boundary comes back
    unchanged as a one-element list.
    """
    if not has_delimiter(node.value):
        return [copy.copy(node)]

    matches, remainder = split_text(node.value)
    if not matches:
        logger.debug("No sentence boundary in text: %r", node.value[:40])
        return [copy.copy(node)]

    result: list[Node] = []
    for match in matches:
        children = [Text(match.text)] if match.text else []
        children.append(Delimiter(match.delimiter))
        result.append(Sentence(children=children))
        if match.has_separator:
            result.append(Text(SEPARATOR))

    if remainder:
        result.append(Text(remainder))

    return result


def _split_children(children: list[Node]) -> list[Node]:
    new_children: list[Node] = []
    for child in children:
        if isinstance(child, Text):
            new_children.extend(segment_text_node(child))
        elif isinstance(child, Sentence):
            # Already segmented
            new_children.append(copy.deepcopy(child))
        elif has_children(child):
            new_children.append(dataclasses.replace(child, children=_split_children(child.children)))
        else:
            new_children.append(copy.copy(child))
    return new_children


def split_sentences(tree: Root) -> Root:
    """
    Return a copy of tree with every qualifying Text leaf split into sentences.

    Sibling order is preserved and the input tree is left untouched. Running
    this on its own output changes nothing.
    """
    return Root(children=_split_children(tree.children))


def count_sentences(tree: Node) -> int:
    """Count Sentence nodes anywhere in a tree."""
    count = 1 if isinstance(tree, Sentence) else 0
    for child in getattr(tree, "children", ()):
        count += count_sentences(child)
    return count
