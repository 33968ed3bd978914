"""Markdown parsing to a flat document tree."""

import re
from dataclasses import dataclass
from typing import Optional

from ..nodes import (
    BlockNode,
    Blockquote,
    Code,
    Emphasis,
    Heading,
    InlineCode,
    InlineNode,
    List,
    ListItem,
    Paragraph,
    Root,
    Strong,
    Text,
    ThematicBreak,
)

HEADER_PATTERN = re.compile(r'^ {0,3}(#{1,6})\s+(.+?)(?:\s+#+)?\s*$')
FENCE_PATTERN = re.compile(r'^ {0,3}(`{3,}|~{3,})\s*([^`\s]*)\s*$')
BREAK_PATTERN = re.compile(r'^ {0,3}([-*_])(?:\s*\1){2,}\s*$')
QUOTE_PATTERN = re.compile(r'^ {0,3}>\s?(.*)$')
LIST_PATTERN = re.compile(r'^( *)([-*+]|\d{1,9}[.)])( +|$)(.*)$')

# Inline code first so its contents are never treated as emphasis
INLINE_PATTERN = re.compile(r'`([^`]+)`|\*\*(.+?)\*\*|\*([^*\s](?:[^*]*[^*\s])?)\*')


@dataclass
class _ListMarker:
    indent: int
    ordered: bool
    number: Optional[int]
    width: int  # columns up to the item content
    content: str


def _strip_front_matter(content: str) -> tuple[str, dict]:
    """
    Strip YAML front-matter from content.

    Returns:
        Tuple of (content without front-matter, extracted metadata dict)
    """
    metadata: dict = {}
    if not content.startswith('---'):
        return content, metadata

    # Find closing ---
    end_match = re.search(r'\n---\s*\n', content[3:])
    if not end_match:
        return content, metadata

    front_matter = content[3:3 + end_match.start()]
    rest = content[3 + end_match.end():]

    title_match = re.search(r'^title:\s*["\']?(.+?)["\']?\s*$', front_matter, re.MULTILINE)
    if title_match:
        metadata['title'] = title_match.group(1).strip()

    return rest, metadata


def _list_marker(line: str) -> Optional[_ListMarker]:
    match = LIST_PATTERN.match(line)
    if not match:
        return None
    indent, marker, spacing, content = match.groups()
    ordered = marker[-1] in '.)'
    # A marker followed by nothing is an empty item; its content starts one column later
    width = len(indent) + len(marker) + (len(spacing) if spacing else 1)
    return _ListMarker(
        indent=len(indent),
        ordered=ordered,
        number=int(marker[:-1]) if ordered else None,
        width=width,
        content=content,
    )


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(' '))


def _starts_block(line: str) -> bool:
    """Check whether a line opens a block that interrupts a paragraph."""
    return bool(
        HEADER_PATTERN.match(line)
        or FENCE_PATTERN.match(line)
        or BREAK_PATTERN.match(line)
        or QUOTE_PATTERN.match(line)
        or _list_marker(line)
    )


def parse_inline(text: str) -> list[InlineNode]:
    """Parse inline code, strong and emphasis spans; everything else is Text."""
    nodes: list[InlineNode] = []
    last = 0
    for match in INLINE_PATTERN.finditer(text):
        if match.start() > last:
            nodes.append(Text(text[last:match.start()]))
        code, strong, emphasis = match.groups()
        if code is not None:
            nodes.append(InlineCode(code))
        elif strong is not None:
            nodes.append(Strong(children=parse_inline(strong)))
        else:
            nodes.append(Emphasis(children=parse_inline(emphasis)))
        last = match.end()
    if last < len(text):
        nodes.append(Text(text[last:]))
    return nodes


def _parse_fence(lines: list[str], i: int) -> tuple[Code, int]:
    match = FENCE_PATTERN.match(lines[i])
    fence, lang = match.group(1), match.group(2)
    body: list[str] = []
    i += 1
    while i < len(lines):
        if lines[i].strip().startswith(fence[0] * len(fence)) and not lines[i].strip().strip(fence[0]):
            i += 1
            break
        body.append(lines[i])
        i += 1
    return Code(value='\n'.join(body), lang=lang or None), i


def _parse_quote(lines: list[str], i: int) -> tuple[Blockquote, int]:
    inner: list[str] = []
    while i < len(lines):
        match = QUOTE_PATTERN.match(lines[i])
        if match:
            inner.append(match.group(1))
        elif lines[i].strip() and inner and inner[-1].strip() and not _starts_block(lines[i]):
            # Lazy continuation of a quoted paragraph
            inner.append(lines[i].strip())
        else:
            break
        i += 1
    return Blockquote(children=_parse_blocks(inner)), i


def _next_content_line(lines: list[str], i: int) -> int:
    while i < len(lines) and not lines[i].strip():
        i += 1
    return i


def _parse_list(lines: list[str], i: int) -> tuple[List, int]:
    first = _list_marker(lines[i])
    items: list[ListItem] = []

    while i < len(lines):
        marker = _list_marker(lines[i])
        if marker is None or marker.ordered != first.ordered or marker.indent != first.indent:
            break

        item_lines = [marker.content]
        i += 1
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                # Blank lines stay in the item only if indented content follows
                j = _next_content_line(lines, i)
                if j < len(lines) and _indent(lines[j]) >= marker.width:
                    item_lines.extend([''] * (j - i))
                    i = j
                    continue
                break
            if _indent(line) >= marker.width:
                item_lines.append(line[marker.width:])
            elif _starts_block(line):
                break
            else:
                item_lines.append(line.strip())
            i += 1

        items.append(ListItem(children=_parse_blocks(item_lines)))

        j = _next_content_line(lines, i)
        following = _list_marker(lines[j]) if j < len(lines) else None
        if following is None or following.ordered != first.ordered or following.indent != first.indent:
            break
        i = j

    return List(children=items, ordered=first.ordered, start=first.number), i


def _parse_paragraph(lines: list[str], i: int) -> tuple[Paragraph, int]:
    text_lines = [lines[i].strip()]
    i += 1
    while i < len(lines) and lines[i].strip() and not _starts_block(lines[i]):
        text_lines.append(lines[i].strip())
        i += 1
    return Paragraph(children=parse_inline('\n'.join(text_lines))), i


def _parse_blocks(lines: list[str]) -> list[BlockNode]:
    blocks: list[BlockNode] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if not line.strip():
            i += 1
            continue

        header = HEADER_PATTERN.match(line)
        if header:
            depth = len(header.group(1))
            blocks.append(Heading(depth=depth, children=parse_inline(header.group(2).strip())))
            i += 1
        elif FENCE_PATTERN.match(line):
            block, i = _parse_fence(lines, i)
            blocks.append(block)
        elif BREAK_PATTERN.match(line):
            blocks.append(ThematicBreak())
            i += 1
        elif QUOTE_PATTERN.match(line):
            block, i = _parse_quote(lines, i)
            blocks.append(block)
        elif _list_marker(line):
            block, i = _parse_list(lines, i)
            blocks.append(block)
        else:
            block, i = _parse_paragraph(lines, i)
            blocks.append(block)
    return blocks


def parse_markdown(content: str) -> Root:
    """
    Parse markdown content into a flat document tree.

    Headings, paragraphs, fenced code, block quotes, lists and thematic
    breaks are recognized at block level, and inline code, strong and
    emphasis inside text. Headings keep only their inline text; nesting
    content under headings is the job of build_semantic_tree.
    """
    content, _ = _strip_front_matter(content)
    lines = content.expandtabs(4).split('\n')
    return Root(children=_parse_blocks(lines))
