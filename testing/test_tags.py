"""
Tests for the Telegraph tag vocabulary.
"""

from telepage.content.tags import (
    ALLOWED_ATTRIBUTES,
    SUPPORTED_TAGS,
    TAG_RENAMES,
    attribute_allow_list,
    is_supported_tag,
)


class TestVocabulary:
    def test_has_all_telegraph_tags(self):
        assert SUPPORTED_TAGS == {
            "a", "aside", "b", "blockquote", "br", "code", "em", "figcaption",
            "figure", "h3", "h4", "hr", "i", "iframe", "img", "li", "ol", "p",
            "pre", "s", "strong", "u", "ul", "video",
        }  # fmt: skip

    def test_membership(self):
        assert is_supported_tag("p")
        assert is_supported_tag("IFRAME")
        assert not is_supported_tag("h1")
        assert not is_supported_tag("div")
        assert not is_supported_tag("script")

    def test_renames_target_vocabulary(self):
        for source, target in TAG_RENAMES.items():
            assert not is_supported_tag(source)
            assert is_supported_tag(target)


class TestAttributeAllowList:
    def test_links_keep_href(self):
        assert attribute_allow_list("a") == {"href"}

    def test_media_keep_src(self):
        for tag in ("img", "iframe", "video"):
            assert attribute_allow_list(tag) == {"src"}

    def test_other_tags_keep_nothing(self):
        assert attribute_allow_list("p") == frozenset()
        assert attribute_allow_list("unknown") == frozenset()

    def test_allowed_attributes_only_reference_supported_tags(self):
        assert set(ALLOWED_ATTRIBUTES) <= SUPPORTED_TAGS
