"""Tests for the markdown reader and the node model."""

import pytest

from mdsemtree.nodes import (
    Blockquote,
    Code,
    Emphasis,
    Heading,
    InlineCode,
    List,
    ListItem,
    Paragraph,
    Root,
    Sentence,
    Strong,
    Text,
    ThematicBreak,
    iter_nodes,
    node_from_dict,
    node_to_dict,
    text_content,
)
from mdsemtree.parser.markdown import parse_inline, parse_markdown, _strip_front_matter


class TestStripFrontMatter:
    def test_with_front_matter(self):
        content = "---\ntitle: My Doc\nauthor: Test\n---\n# Hello\n"
        stripped, meta = _strip_front_matter(content)
        assert stripped == "# Hello\n"
        assert meta["title"] == "My Doc"

    def test_without_front_matter(self):
        content = "# Hello\n\nNo front matter here.\n"
        stripped, meta = _strip_front_matter(content)
        assert stripped == content
        assert meta == {}

    def test_front_matter_not_parsed_as_blocks(self):
        tree = parse_markdown("---\ntitle: Doc\n---\n# Hello\n")
        assert tree.children == [Heading(depth=1, children=[Text("Hello")])]


class TestParseInline:
    def test_plain_text(self):
        assert parse_inline("Just text.") == [Text("Just text.")]

    def test_code_strong_emphasis(self):
        nodes = parse_inline("Use `code` and **bold** and *em*.")
        assert nodes == [
            Text("Use "),
            InlineCode("code"),
            Text(" and "),
            Strong(children=[Text("bold")]),
            Text(" and "),
            Emphasis(children=[Text("em")]),
            Text("."),
        ]

    def test_asterisks_inside_code_stay_code(self):
        assert parse_inline("`a * b * c`") == [InlineCode("a * b * c")]


class TestParseMarkdown:
    def test_headings_and_paragraphs(self):
        tree = parse_markdown("# Title\n\nSome text.\nMore text.\n\n## Sub #\n")
        assert tree.children == [
            Heading(depth=1, children=[Text("Title")]),
            Paragraph(children=[Text("Some text.\nMore text.")]),
            Heading(depth=2, children=[Text("Sub")]),
        ]

    def test_hash_without_space_is_paragraph(self):
        tree = parse_markdown("#hashtag\n")
        assert isinstance(tree.children[0], Paragraph)

    def test_fenced_code(self):
        tree = parse_markdown("```python\nx = 1. y = 2\n```\n")
        assert tree.children == [Code(value="x = 1. y = 2", lang="python")]

    def test_fenced_code_without_lang(self):
        tree = parse_markdown("~~~\nplain\n~~~\n")
        assert tree.children == [Code(value="plain", lang=None)]

    def test_thematic_break(self):
        tree = parse_markdown("Above.\n\n---\n\n***\n")
        assert tree.children[1:] == [ThematicBreak(), ThematicBreak()]

    def test_blockquote(self):
        tree = parse_markdown("> Quoted. Here\n> more\n")
        assert tree.children == [
            Blockquote(children=[Paragraph(children=[Text("Quoted. Here\nmore")])]),
        ]

    def test_bullet_list_with_nesting(self):
        tree = parse_markdown("- one\n- two\n  - nested\n")
        assert tree.children == [
            List(children=[
                ListItem(children=[Paragraph(children=[Text("one")])]),
                ListItem(children=[
                    Paragraph(children=[Text("two")]),
                    List(children=[ListItem(children=[Paragraph(children=[Text("nested")])])]),
                ]),
            ]),
        ]

    def test_ordered_list_start(self):
        tree = parse_markdown("3. first\n4. second\n")
        lst = tree.children[0]
        assert isinstance(lst, List)
        assert lst.ordered is True
        assert lst.start == 3
        assert len(lst.children) == 2

    def test_loose_list_stays_one_list(self):
        tree = parse_markdown("- one\n\n- two\n\nAfter.\n")
        assert len(tree.children) == 2
        assert len(tree.children[0].children) == 2
        assert tree.children[1] == Paragraph(children=[Text("After.")])

    def test_list_interrupts_paragraph(self):
        tree = parse_markdown("Intro:\n- a\n- b\n")
        assert isinstance(tree.children[0], Paragraph)
        assert isinstance(tree.children[1], List)

    def test_sample_document_is_flat(self, sample_markdown):
        tree = parse_markdown(sample_markdown)
        headings = [n for n in tree.children if isinstance(n, Heading)]
        assert [h.depth for h in headings] == [1, 2, 2, 3, 3, 2]
        for heading in headings:
            assert all(isinstance(c, Text) for c in heading.children)


class TestNodeModel:
    def test_type_tags(self):
        assert Text("x").type == "text"
        assert Sentence().type == "sentence"
        assert Heading(depth=1).type == "heading"
        assert List().type == "list"
        assert ListItem().type == "listItem"

    def test_to_dict(self):
        data = node_to_dict(Root(children=[Heading(depth=2, children=[Text("Hi")])]))
        assert data == {
            "type": "root",
            "children": [
                {"type": "heading", "depth": 2, "children": [{"type": "text", "value": "Hi"}]},
            ],
        }

    def test_from_dict_roundtrip(self, flat_tree):
        assert node_from_dict(node_to_dict(flat_tree)) == flat_tree

    def test_from_dict_heading_without_children_or_depth(self):
        heading = node_from_dict({"type": "heading"})
        assert heading == Heading(depth=6, children=[])

    def test_from_dict_unknown_type(self):
        with pytest.raises(ValueError):
            node_from_dict({"type": "mystery"})

    def test_iter_nodes_preorder(self):
        tree = Root(children=[Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])])
        types = [n.type for n in iter_nodes(tree)]
        assert types == ["root", "paragraph", "text", "paragraph", "text"]

    def test_text_content_direct_text_only(self):
        heading = Heading(depth=1, children=[Text("A "), Emphasis(children=[Text("B")]), Text("C")])
        assert text_content(heading) == "A C"
