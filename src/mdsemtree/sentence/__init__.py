"""Sentence boundary segmentation."""

from .matcher import find_sentence_matches, split_text, SentenceMatch
from .splitter import split_sentences, segment_text_node, count_sentences
from .annotate import annotate_sentences

__all__ = [
    "find_sentence_matches",
    "split_text",
    "SentenceMatch",
    "split_sentences",
    "segment_text_node",
    "count_sentences",
    "annotate_sentences",
]
