"""
Tests for HTML/Markdown normalization.

normalize() must leave only Telegraph tags and attributes; everything else
is either unwrapped to its text or dropped together with its content.
"""

import pytest

from telepage.content import InvalidParseMode, ParseMode, normalize, resolve_parse_mode
from telepage.content.normalizer import render_markdown, rename_tags, sanitize_html


class TestResolveParseMode:
    @pytest.mark.parametrize("value", ["html", "HTML", "Html", "  html "])
    def test_html(self, value):
        assert resolve_parse_mode(value) is ParseMode.HTML

    @pytest.mark.parametrize("value", ["markdown", "Markdown", "MARKDOWN"])
    def test_markdown(self, value):
        assert resolve_parse_mode(value) is ParseMode.MARKDOWN

    def test_enum_passes_through(self):
        assert resolve_parse_mode(ParseMode.MARKDOWN) is ParseMode.MARKDOWN

    @pytest.mark.parametrize("value", ["md", "text", "", "MarkdownV2"])
    def test_unknown_mode(self, value):
        with pytest.raises(InvalidParseMode) as exc_info:
            resolve_parse_mode(value)
        assert exc_info.value.mode == value

    def test_non_string_mode(self):
        with pytest.raises(InvalidParseMode):
            resolve_parse_mode(1)


class TestRenderMarkdown:
    def test_plain_text_stays_plain(self):
        assert render_markdown("hello world") == "hello world"

    def test_emphasis(self):
        assert render_markdown("**bold** and *it*") == (
            "<p><strong>bold</strong> and <em>it</em></p>"
        )

    def test_strikethrough(self):
        assert render_markdown("~~gone~~") == "<p><del>gone</del></p>"

    def test_single_tilde_untouched(self):
        assert render_markdown("~approx~") == "~approx~"

    def test_fenced_code(self):
        assert render_markdown("```\ncode\n```") == "<pre><code>code\n</code></pre>"

    def test_multiple_paragraphs_stay_wrapped(self):
        assert render_markdown("one\n\ntwo") == "<p>one</p>\n<p>two</p>"


class TestRenameTags:
    def test_headings(self):
        assert rename_tags("<h1>a</h1><h2>b</h2><h5>c</h5><h6>d</h6>") == (
            "<h3>a</h3><h4>b</h4><h3>c</h3><h4>d</h4>"
        )

    def test_del_becomes_s(self):
        assert rename_tags("<p><del>x</del></p>") == "<p><s>x</s></p>"

    def test_supported_tags_untouched(self):
        assert rename_tags("<h3>a</h3><p><s>b</s></p>") == "<h3>a</h3><p><s>b</s></p>"

    def test_pads_leading_newline_in_pre(self):
        assert rename_tags("<pre>\n\nx</pre>") == "<pre>\n\n\nx</pre>"

    def test_pre_without_leading_newline_untouched(self):
        assert rename_tags("<pre>x\n</pre><pre><code>\ny</code></pre>") == (
            "<pre>x\n</pre><pre><code>\ny</code></pre>"
        )

    @pytest.mark.parametrize("tag", ["script", "style", "textarea", "noscript"])
    def test_drops_element_with_content(self, tag):
        assert rename_tags(f"<p>keep</p><{tag}>secret</{tag}>") == "<p>keep</p>"


class TestSanitizeHtml:
    def test_unsupported_tags_unwrapped(self):
        assert sanitize_html("<div><span>text</span></div>") == "text"

    def test_attributes_filtered(self):
        assert sanitize_html('<a href="https://e.com" title="t" onclick="x()">l</a>') == (
            '<a href="https://e.com">l</a>'
        )

    def test_attributes_removed_from_plain_tags(self):
        assert sanitize_html('<p class="lead" style="color: red">x</p>') == "<p>x</p>"

    def test_unsafe_protocol_removed(self):
        assert sanitize_html('<a href="javascript:alert(1)">x</a>') == "<a>x</a>"

    def test_comments_removed(self):
        assert sanitize_html("<p>a<!-- note -->b</p>") == "<p>ab</p>"


class TestNormalize:
    def test_html_mode(self):
        assert normalize("<h1>Title</h1><script>x()</script>", "HTML") == "<h3>Title</h3>"

    def test_markdown_mode(self):
        assert normalize("# Title", "Markdown") == "<h3>Title</h3>"

    def test_markdown_strikethrough_renamed(self):
        assert normalize("~~gone~~", ParseMode.MARKDOWN) == "<p><s>gone</s></p>"

    def test_markdown_raw_html_sanitized(self):
        assert normalize('<div onclick="x()">**b**</div>', "markdown") == "**b**"

    def test_invalid_mode(self):
        with pytest.raises(InvalidParseMode):
            normalize("<p>x</p>", "rst")
