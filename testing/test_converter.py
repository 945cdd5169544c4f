"""
Tests for DOM -> Telegraph node conversion.
"""

import pytest
from bs4 import BeautifulSoup

from telepage.content import NodeAttrs, NodeElement, UnsupportedTagError
from telepage.content.converter import body_to_nodes, dom_to_node


def body(html: str):
    return BeautifulSoup(html, "html5lib").body


class TestDomToNode:
    def test_text_node(self):
        text = body("hello").contents[0]
        assert dom_to_node(text) == "hello"

    def test_element_with_children(self):
        node = dom_to_node(body("<p>a <b>b</b></p>").p)
        assert node == NodeElement(
            tag="p", children=["a ", NodeElement(tag="b", children=["b"])]
        )

    def test_comment_skipped(self):
        comment = body("<p>a</p><!-- note -->").contents[-1]
        assert dom_to_node(comment) is None

    def test_unsupported_tag(self):
        with pytest.raises(UnsupportedTagError) as exc_info:
            dom_to_node(body("<div>x</div>").div)
        assert exc_info.value.tag == "div"
        assert "not supported" in str(exc_info.value)

    def test_code_inside_pre_reports_pre(self):
        code = body("<pre><code>x = 1\n</code></pre>").code
        assert dom_to_node(code) == NodeElement(tag="pre", children=["x = 1\n"])

    def test_standalone_code(self):
        node = dom_to_node(body("<p><code>x</code></p>").code)
        assert node == NodeElement(tag="code", children=["x"])


class TestAttributes:
    def test_link_href(self):
        node = dom_to_node(body('<a href="https://e.com/">x</a>').a)
        assert node.attrs == NodeAttrs(href="https://e.com/")

    def test_link_without_href(self):
        assert dom_to_node(body("<a>x</a>").a).attrs is None

    def test_image_src_kept_as_is(self):
        node = dom_to_node(body('<img src="https://youtu.be/ABC123">').img)
        assert node == NodeElement(tag="img", attrs=NodeAttrs(src="https://youtu.be/ABC123"))

    def test_iframe_src_rewritten(self):
        node = dom_to_node(body('<iframe src="https://youtu.be/ABC123"></iframe>').iframe)
        assert node.attrs == NodeAttrs(
            src="/embed/youtube?url=https%3A%2F%2Fwww.youtube.com%2Fwatch%3Fv%3DABC123"
        )
        assert node.children is None

    def test_iframe_unknown_src_unchanged(self):
        node = dom_to_node(body('<iframe src="https://example.com/player"></iframe>').iframe)
        assert node.attrs == NodeAttrs(src="https://example.com/player")

    def test_void_element_has_no_children(self):
        node = dom_to_node(body("<p>a<br>b</p>").p)
        assert node.children == ["a", NodeElement(tag="br"), "b"]


class TestWhitespace:
    def test_dropped_between_blocks(self):
        assert body_to_nodes(body("<p>a</p>\n\n<p>b</p>")) == [
            NodeElement(tag="p", children=["a"]),
            NodeElement(tag="p", children=["b"]),
        ]

    def test_dropped_inside_lists(self):
        nodes = body_to_nodes(body("<ul>\n<li>a</li>\n<li>b</li>\n</ul>"))
        assert nodes == [
            NodeElement(
                tag="ul",
                children=[
                    NodeElement(tag="li", children=["a"]),
                    NodeElement(tag="li", children=["b"]),
                ],
            )
        ]

    def test_kept_between_inline_elements(self):
        node = dom_to_node(body("<p><b>a</b> <i>b</i></p>").p)
        assert node.children == [
            NodeElement(tag="b", children=["a"]),
            " ",
            NodeElement(tag="i", children=["b"]),
        ]

    def test_kept_inside_pre(self):
        node = dom_to_node(body("<pre>  x  </pre>").pre)
        assert node.children == ["  x  "]

    def test_sole_child_of_structural_container_dropped(self):
        assert dom_to_node(body("<blockquote> </blockquote>").blockquote) == (
            NodeElement(tag="blockquote")
        )

    def test_sole_child_of_paragraph_kept(self):
        assert dom_to_node(body("<p> </p>").p) == NodeElement(tag="p", children=[" "])

    def test_non_breaking_space_is_content(self):
        nodes = body_to_nodes(body("<p>a</p>\u00a0<p>b</p>"))
        assert nodes[1] == "\u00a0"


class TestBodyToNodes:
    def test_document_order(self):
        nodes = body_to_nodes(body("<h3>T</h3><p>x</p><hr><p>y</p>"))
        assert [node.tag for node in nodes] == ["h3", "p", "hr", "p"]

    def test_adjacent_text_merged_after_code_splice(self):
        assert dom_to_node(body("<pre>a<code>b</code>c</pre>").pre) == (
            NodeElement(tag="pre", children=["abc"])
        )

    def test_adjacent_text_merged_around_comment(self):
        assert dom_to_node(body("<p>a<!-- c -->b</p>").p) == NodeElement(tag="p", children=["ab"])

    def test_pre_code_collapsed(self):
        nodes = body_to_nodes(body("<pre><code>line 1\nline 2</code></pre>"))
        assert nodes == [NodeElement(tag="pre", children=["line 1\nline 2"])]

    def test_comments_skipped(self):
        assert body_to_nodes(body("<p>a</p><!-- c -->")) == [NodeElement(tag="p", children=["a"])]
