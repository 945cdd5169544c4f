"""Convert HTML or Markdown into Telegraph page content.

Example:
    from telepage.content import parse

    nodes = parse("# Title\n\nSome **bold** text", "Markdown")
    # [NodeElement(tag="h3", ...), NodeElement(tag="p", ...)]

    parse("just text", "HTML")
    # "just text"
"""

import logging

from bs4 import BeautifulSoup

from .converter import HTML_WHITESPACE, body_to_nodes, dom_to_node
from .embeds import EMBED_RULES, EmbedMatch, classify, match_embed
from .errors import (
    ContentError,
    DomParseFailure,
    EmptyContent,
    InvalidParseMode,
    UnsupportedTagError,
)
from .nodes import Node, NodeAttrs, NodeElement, dump_node, dump_nodes
from .normalizer import ParseMode, normalize, resolve_parse_mode
from .serializer import node_to_html, nodes_to_html
from .tags import (
    ALLOWED_ATTRIBUTES,
    SUPPORTED_TAGS,
    TAG_RENAMES,
    SupportedTag,
    attribute_allow_list,
    is_supported_tag,
)

logger = logging.getLogger(__name__)


def parse(content: str, mode: ParseMode | str) -> str | list[Node]:
    """Convert HTML or Markdown into Telegraph content.

    Args:
        content: Source text; surrounding HTML whitespace is ignored (NBSP is kept)
        mode: "HTML" or "Markdown" (case-insensitive) or a ParseMode

    Returns:
        The text itself when the content has no markup, otherwise the
        top-level nodes in document order

    Raises:
        InvalidParseMode: mode is not recognized
        DomParseFailure: sanitized HTML could not be parsed into a document
        EmptyContent: nothing renderable is left after sanitization
    """
    parse_mode = resolve_parse_mode(mode)
    html = normalize(content.strip(HTML_WHITESPACE), parse_mode)

    try:
        document = BeautifulSoup(html, "html5lib")
    except Exception as e:
        raise DomParseFailure(f"Failed to parse HTML: {e}", mode=parse_mode.value) from e
    if document.body is None:
        raise DomParseFailure("Parsed document has no body", mode=parse_mode.value)

    nodes = body_to_nodes(document.body)
    if len(nodes) == 1 and isinstance(nodes[0], str):
        text = nodes[0].strip(HTML_WHITESPACE)
        if text:
            return text
        nodes = []
    if not nodes:
        raise EmptyContent("Content is empty after sanitization", mode=parse_mode.value)

    logger.debug(f"Parsed {parse_mode.value} content into {len(nodes)} top-level nodes")
    return nodes


__all__ = [
    # Entry point
    "parse",
    "ParseMode",
    "resolve_parse_mode",
    "normalize",
    # Nodes
    "Node",
    "NodeAttrs",
    "NodeElement",
    "dump_node",
    "dump_nodes",
    "node_to_html",
    "nodes_to_html",
    # Conversion steps
    "dom_to_node",
    "body_to_nodes",
    "classify",
    "match_embed",
    "EmbedMatch",
    "EMBED_RULES",
    # Vocabulary
    "SupportedTag",
    "SUPPORTED_TAGS",
    "TAG_RENAMES",
    "ALLOWED_ATTRIBUTES",
    "is_supported_tag",
    "attribute_allow_list",
    # Errors
    "ContentError",
    "InvalidParseMode",
    "DomParseFailure",
    "EmptyContent",
    "UnsupportedTagError",
]
