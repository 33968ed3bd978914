"""Character-level sentence delimiter scanning.

The scanner only recognizes delimiter characters at a scan position. Whether
a delimiter actually ends a sentence depends on what follows it, and that
check lives in ``matcher``.
"""

import html
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

DELIMITERS = (".", "!", "?")

SENTENCE_BOUNDARY = "sentenceBoundary"
SENTENCE_DELIMITER = "sentenceDelimiter"


@dataclass(frozen=True)
class BoundaryEvent:
    """An enter/exit event for a boundary token at a text offset."""
    kind: str  # "enter" or "exit"
    token: str
    offset: int


def make_delimiter_tokenizer(delimiter: str) -> Callable[[str, int], Optional[list[BoundaryEvent]]]:
    """
    Create a tokenizer for one delimiter character.

    The returned function takes a character and its offset. It returns the
    events for a boundary token when the character is the delimiter, and
    None otherwise.
    """
    def tokenize(char: str, offset: int) -> Optional[list[BoundaryEvent]]:
        if char != delimiter:
            return None
        return [
            BoundaryEvent("enter", SENTENCE_BOUNDARY, offset),
            BoundaryEvent("enter", SENTENCE_DELIMITER, offset),
            BoundaryEvent("exit", SENTENCE_DELIMITER, offset + 1),
            BoundaryEvent("exit", SENTENCE_BOUNDARY, offset + 1),
        ]

    return tokenize


# One tokenizer per delimiter, keyed by the character that triggers it
TOKENIZERS = {delimiter: make_delimiter_tokenizer(delimiter) for delimiter in DELIMITERS}


def scan_boundaries(text: str) -> Iterator[BoundaryEvent]:
    """Scan text left to right, yielding boundary events for every delimiter."""
    for offset, char in enumerate(text):
        tokenizer = TOKENIZERS.get(char)
        if tokenizer is None:
            continue
        events = tokenizer(char, offset)
        if events:
            yield from events


def delimiter_offsets(text: str) -> Iterator[int]:
    """Yield the offset of every delimiter character in text."""
    for event in scan_boundaries(text):
        if event.kind == "enter" and event.token == SENTENCE_DELIMITER:
            yield event.offset


def render_boundaries_html(text: str) -> str:
    """
    Render text as HTML with every delimiter wrapped in boundary spans.

    Example:
        "Hi. Bye" -> 'Hi<span class="sentence-boundary">
                      <span class="sentence-delimiter">.</span></span> Bye'
        (without the line break)
    """
    parts: list[str] = []
    last = 0
    for event in scan_boundaries(text):
        if event.kind == "enter":
            if event.token == SENTENCE_BOUNDARY:
                parts.append(html.escape(text[last:event.offset], quote=False))
                parts.append('<span class="sentence-boundary">')
            else:
                parts.append('<span class="sentence-delimiter">')
        else:
            if event.token == SENTENCE_DELIMITER:
                parts.append(html.escape(text[event.offset - 1:event.offset], quote=False))
            parts.append("</span>")
            last = event.offset
    parts.append(html.escape(text[last:], quote=False))
    return "".join(parts)
