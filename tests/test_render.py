"""Tests for output tree conversion, sentence annotation and HTML."""

import pytest

from mdsemtree.hast import (
    Element,
    HastDelimiter,
    HastRoot,
    HastText,
    hast_from_dict,
    hast_to_dict,
    span,
    to_hast,
    to_html,
)
from mdsemtree.nodes import Code, Delimiter, Heading, List, ListItem, Paragraph, Root, Sentence, Text
from mdsemtree.parser.markdown import parse_markdown
from mdsemtree.semtree.builder import build_semantic_tree
from mdsemtree.sentence.annotate import annotate_sentences, sentence_elements
from mdsemtree.sentence.splitter import split_sentences

EXAMPLE = "This is a test. This is another test!"


def _elements_with_class(node, class_name: str) -> list[Element]:
    found = []
    if isinstance(node, Element) and class_name in node.class_names:
        found.append(node)
    for child in getattr(node, "children", []):
        found.extend(_elements_with_class(child, class_name))
    return found


class TestToHast:
    def test_sentence_becomes_span(self):
        tree = Root(children=[Paragraph(children=[
            Sentence(children=[Text("Hi"), Delimiter(".")]),
        ])])
        hast = to_hast(tree)
        paragraph = hast.children[0]
        assert paragraph.tag_name == "p"
        assert paragraph.children == [
            Element("span", {"className": ["sentence"]}, [HastText("Hi"), HastDelimiter(".")]),
        ]

    def test_semantic_heading_becomes_section(self):
        tree = build_semantic_tree(parse_markdown("# Title\n\nBody\n"))
        section = to_hast(tree).children[0]
        assert section.tag_name == "section"
        assert [c.tag_name for c in section.children] == ["h1", "p"]

    def test_flat_heading(self):
        hast = to_hast(Root(children=[Heading(depth=3, children=[Text("T")])]))
        assert hast.children == [Element("h3", {}, [HastText("T")])]

    def test_code_and_ordered_list(self):
        tree = Root(children=[
            Code(value="x < 1", lang="py"),
            List(ordered=True, start=2, children=[ListItem(children=[Paragraph(children=[Text("a")])])]),
        ])
        html = to_html(to_hast(tree))
        assert '<pre><code class="language-py">x &lt; 1</code></pre>' in html
        assert '<ol start="2">' in html

    def test_unknown_node_rejected(self):
        with pytest.raises(TypeError):
            to_hast(Root(children=[object()]))


class TestAnnotateSentences:
    def test_delimiters_from_split_tree(self):
        hast = annotate_sentences(to_hast(split_sentences(parse_markdown(EXAMPLE))))
        sentences = _elements_with_class(hast, "sentence")
        delimiters = _elements_with_class(hast, "sentence-delimiter")
        assert len(sentences) == 2
        assert [d.children for d in delimiters] == [[HastText(".")], [HastText("!")]]
        # Each delimiter span sits inside its sentence span
        assert sentences[0].children[-1] is delimiters[0]

    def test_fallback_rescans_raw_paragraph_text(self):
        hast = annotate_sentences(to_hast(parse_markdown(EXAMPLE)))
        paragraph = hast.children[0]
        assert paragraph.children == [
            span([HastText("This is a test"), span([HastText(".")], "sentence-delimiter")], "sentence"),
            span([HastText(" ")]),
            span([HastText("This is another test"), span([HastText("!")], "sentence-delimiter")], "sentence"),
        ]

    def test_fallback_keeps_partial_sentence(self):
        nodes = sentence_elements("Done. Not done")
        assert nodes[-1] == span([HastText("Not done")])

    def test_no_boundary_text_untouched(self):
        tree = HastRoot(children=[Element("p", {}, [HastText("Version 2.0 released")])])
        assert annotate_sentences(tree) == tree

    def test_only_paragraph_text_is_rescanned(self):
        tree = HastRoot(children=[Element("h1", {}, [HastText("Title. Sub")])])
        assert annotate_sentences(tree) == tree

    def test_wrapped_text_not_wrapped_again(self):
        wrapped = span([HastText("Already. Wrapped.")], "sentence")
        tree = HastRoot(children=[Element("p", {}, [wrapped])])
        assert annotate_sentences(tree) == tree

    def test_idempotent(self):
        once = annotate_sentences(to_hast(parse_markdown(EXAMPLE + "\n\nMore here. End")))
        assert annotate_sentences(once) == once

    def test_input_not_mutated(self):
        hast = to_hast(split_sentences(parse_markdown(EXAMPLE)))
        before = hast_to_dict(hast)
        annotate_sentences(hast)
        assert hast_to_dict(hast) == before


class TestToHtml:
    def test_end_to_end(self):
        hast = annotate_sentences(to_hast(split_sentences(parse_markdown(EXAMPLE))))
        assert to_html(hast) == (
            '<p><span class="sentence">This is a test'
            '<span class="sentence-delimiter">.</span></span> '
            '<span class="sentence">This is another test'
            '<span class="sentence-delimiter">!</span></span></p>'
        )

    def test_escapes_text(self):
        assert to_html(HastText("a < b & c")) == "a &lt; b &amp; c"

    def test_void_element(self):
        assert to_html(Element("hr")) == "<hr>"

    def test_block_children_on_own_lines(self):
        html = to_html(to_hast(parse_markdown("- one\n- two\n")))
        assert html == "<ul>\n<li>\n<p>one</p>\n</li>\n<li>\n<p>two</p>\n</li>\n</ul>"


class TestHastDicts:
    def test_from_dict_accepts_tag_name_spelling(self):
        node = hast_from_dict({
            "type": "element",
            "tagName": "p",
            "properties": {},
            "children": [{"type": "text", "value": "Hi. There"}],
        })
        assert node == Element("p", {}, [HastText("Hi. There")])

    def test_roundtrip(self):
        hast = annotate_sentences(to_hast(split_sentences(parse_markdown(EXAMPLE))))
        assert hast_from_dict(hast_to_dict(hast)) == hast

    def test_delimiter_type_preserved(self):
        assert hast_from_dict({"type": "sentenceDelimiter", "value": "?"}) == HastDelimiter("?")

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            hast_from_dict({"type": "comment", "value": "x"})
