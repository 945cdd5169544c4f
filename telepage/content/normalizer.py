"""Turn raw HTML or Markdown into sanitized HTML using only Telegraph tags.

Pipeline:
1. Markdown is rendered to HTML with Python-Markdown (HTML passes through).
2. Script-like elements are dropped together with their content and tags are
   renamed to Telegraph's vocabulary (h1 -> h3, del -> s, ...). This module is
   the only place renaming happens; the tree converter sees final names.
   A leading newline inside <pre> is padded so the later parses keep it.
3. bleach strips every other tag (keeping its text) and every attribute
   outside ALLOWED_ATTRIBUTES.
"""

import logging
import re
from enum import Enum

import bleach
import markdown
from bs4 import BeautifulSoup, NavigableString
from bs4.element import PreformattedString
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

from .errors import InvalidParseMode
from .tags import ALLOWED_ATTRIBUTES, SUPPORTED_TAGS, TAG_RENAMES

logger = logging.getLogger(__name__)

# Removed with their content instead of being unwrapped to text
DROPPED_WITH_CONTENT = ("script", "style", "textarea", "option", "noscript", "template")

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "tg"})

MARKDOWN_EXTENSIONS = ["fenced_code", "sane_lists"]

# ~~text~~ -> <del>text</del>
STRIKETHROUGH_PATTERN = r"(~{2})(.+?)~{2}"

# Markdown wraps bare text in a paragraph; plain text should stay plain text
LONE_PARAGRAPH_PATTERN = re.compile(r"\A<p>([^<]*)</p>\Z")

# bleach and the final parse each drop one newline directly after <pre>
PRE_NEWLINE_PADDING = "\n\n"


class ParseMode(str, Enum):
    """Input formats accepted by the converter."""

    HTML = "html"
    MARKDOWN = "markdown"


class StrikethroughExtension(Extension):
    """Python-Markdown extension adding GitHub-style ~~strikethrough~~."""

    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            40,
        )


def resolve_parse_mode(mode: ParseMode | str) -> ParseMode:
    """Validate a parse mode given as enum or case-insensitive string.

    Raises:
        InvalidParseMode: mode is not "html" or "markdown"
    """
    if isinstance(mode, ParseMode):
        return mode
    if not isinstance(mode, str):
        raise InvalidParseMode(f"Invalid parse mode: {mode!r}", mode=repr(mode))
    try:
        return ParseMode(mode.strip().lower())
    except ValueError:
        raise InvalidParseMode(f"Invalid parse mode: {mode!r}", mode=mode) from None


def render_markdown(text: str) -> str:
    """Render Markdown to HTML, unwrapping a lone text-only paragraph."""
    html = markdown.markdown(
        text,
        extensions=[*MARKDOWN_EXTENSIONS, StrikethroughExtension()],
        output_format="html",
    )
    lone = LONE_PARAGRAPH_PATTERN.match(html)
    if lone:
        return lone.group(1)
    return html


def rename_tags(html: str) -> str:
    """Drop script-like elements and map tags onto Telegraph's vocabulary."""
    soup = BeautifulSoup(html, "html5lib")
    root = soup.body or soup

    for element in root.find_all(list(DROPPED_WITH_CONTENT)):
        element.decompose()

    renamed = 0
    for element in root.find_all(list(TAG_RENAMES)):
        element.name = TAG_RENAMES[element.name]
        renamed += 1
    if renamed:
        logger.debug(f"Renamed {renamed} tags to Telegraph equivalents")

    for pre in root.find_all("pre"):
        first = pre.contents[0] if pre.contents else None
        if (
            isinstance(first, NavigableString)
            and not isinstance(first, PreformattedString)
            and first.startswith("\n")
        ):
            first.replace_with(PRE_NEWLINE_PADDING + str(first))

    return root.decode_contents() if soup.body else str(soup)


def sanitize_html(html: str) -> str:
    """Strip tags and attributes Telegraph does not accept."""
    return bleach.clean(
        html,
        tags=SUPPORTED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


def normalize(content: str, mode: ParseMode | str) -> str:
    """Produce sanitized HTML containing only Telegraph tags and attributes.

    Args:
        content: HTML or Markdown source
        mode: ParseMode or "html" / "markdown" (case-insensitive)

    Returns:
        Sanitized HTML fragment

    Raises:
        InvalidParseMode: mode is not recognized
    """
    parse_mode = resolve_parse_mode(mode)
    html = render_markdown(content) if parse_mode is ParseMode.MARKDOWN else content
    return sanitize_html(rename_tags(html))
