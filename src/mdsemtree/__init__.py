"""Sentence segmentation and semantic heading trees for markdown document trees."""

from .config import SemtreeOptions
from .parser import parse_markdown
from .sentence import split_sentences, annotate_sentences
from .semtree import build_semantic_tree, extract_heading_content, create_subtree

__all__ = [
    "SemtreeOptions",
    "parse_markdown",
    "split_sentences",
    "annotate_sentences",
    "build_semantic_tree",
    "extract_heading_content",
    "create_subtree",
]
