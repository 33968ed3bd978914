"""Sentence boundary matching over plain strings."""

import re
from dataclasses import dataclass

from .scanner import DELIMITERS, delimiter_offsets

# What may follow a delimiter for it to end a sentence. Whitespace is
# consumed; quotes and closing brackets are left for the following text.
_TRAILING_CONTEXT = re.compile(r'(\s+)|\Z|(?=["\'\)\]])')

SEPARATOR = " "


@dataclass(frozen=True)
class SentenceMatch:
    """One recognized sentence inside a string."""
    text: str       # sentence text without its delimiter
    delimiter: str
    trailing: str   # whitespace consumed after the delimiter
    start: int
    end: int

    @property
    def has_separator(self) -> bool:
        """Whether a separator node follows the sentence."""
        return bool(self.trailing)


def has_delimiter(text: str) -> bool:
    return any(delimiter in text for delimiter in DELIMITERS)


def find_sentence_matches(text: str) -> list[SentenceMatch]:
    """
    Find every sentence boundary in text, scanning left to right.

    A delimiter ends a sentence only when followed by whitespace, the end of
    the string, a quote, or a closing bracket.
    """
    matches: list[SentenceMatch] = []
    last = 0
    for offset in delimiter_offsets(text):
        if offset < last:
            continue
        context = _TRAILING_CONTEXT.match(text, offset + 1)
        if context is None:
            continue
        trailing = context.group(1) or ""
        matches.append(SentenceMatch(
            text=text[last:offset],
            delimiter=text[offset],
            trailing=trailing,
            start=last,
            end=context.end(),
        ))
        last = context.end()
    return matches


def split_text(text: str) -> tuple[list[SentenceMatch], str]:
    """
    Split text into sentence matches and the trailing partial sentence.

    Returns:
        Tuple of (matches, remainder). The remainder is the text after the
        last boundary, or the whole string when there is no boundary.
    """
    matches = find_sentence_matches(text)
    last = matches[-1].end if matches else 0
    return matches, text[last:]
