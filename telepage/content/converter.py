"""Convert a parsed, sanitized HTML document into Telegraph nodes.

The converter only reads the BeautifulSoup tree and builds new NodeElement
objects. Tag names are already final (see normalizer), so the only rewrites
left here are collapsing <pre><code> into one <pre> and routing iframe
sources through the embed classifier.

Whitespace policy: a whitespace-only text node is dropped when a neighbouring
sibling is a block element, or when it is the only child of a structural
container (body, lists, blockquote, figure, aside). Text inside <pre> and all
other text is kept verbatim.
"""

import logging

from bs4 import NavigableString, PageElement, Tag
from bs4.element import PreformattedString

from .embeds import classify
from .errors import UnsupportedTagError
from .nodes import Node, NodeAttrs, NodeElement
from .tags import BLOCK_TAGS, is_supported_tag

logger = logging.getLogger(__name__)

STRUCTURAL_CONTAINERS = frozenset({"body", "ol", "ul", "blockquote", "figure", "aside"})

# HTML whitespace; a non-breaking space is content
HTML_WHITESPACE = " \t\n\r\f"


def _is_block(element: PageElement | None) -> bool:
    return isinstance(element, Tag) and element.name in BLOCK_TAGS


def _is_insignificant_whitespace(text: NavigableString, parent_tag: str) -> bool:
    if text.strip(HTML_WHITESPACE) or parent_tag == "pre":
        return False
    previous, following = text.previous_sibling, text.next_sibling
    if previous is None and following is None:
        return parent_tag in STRUCTURAL_CONTAINERS
    return _is_block(previous) or _is_block(following)


def _extract_attrs(element: Tag, tag: str) -> NodeAttrs | None:
    # Sanitization never leaves both; href wins if it somehow does
    href = element.get("href")
    if href is not None:
        return NodeAttrs(href=href)
    src = element.get("src")
    if src is not None:
        return NodeAttrs(src=classify(src) if tag == "iframe" else src)
    return None


def _output_tag(element: Tag) -> str:
    tag = element.name.lower()
    if tag == "code" and element.parent is not None and element.parent.name == "pre":
        return "pre"
    return tag


def _append(children: list[Node], node: Node) -> None:
    # Adjacent text (left by <code> splicing or skipped comments) is one node
    if isinstance(node, str) and children and isinstance(children[-1], str):
        children[-1] += node
    else:
        children.append(node)


def _convert_children(element: Tag, tag: str) -> list[Node]:
    children: list[Node] = []
    for child in element.children:
        if isinstance(child, PreformattedString):
            # Comments, CDATA, doctype
            continue
        if isinstance(child, NavigableString):
            if child and not _is_insignificant_whitespace(child, tag):
                _append(children, str(child))
            continue
        if tag == "pre" and isinstance(child, Tag) and child.name == "code":
            # <pre><code>x</code></pre> renders as a single <pre>x</pre>
            for node in _convert_children(child, "pre"):
                _append(children, node)
            continue
        node = dom_to_node(child)
        if node:
            _append(children, node)
    return children


def dom_to_node(element: PageElement) -> Node | None:
    """Convert one DOM node (and its subtree) into a Telegraph node.

    Args:
        element: Text or element node from a sanitized document

    Returns:
        The text itself for text nodes, a NodeElement for elements, or None
        for comments and other non-content nodes

    Raises:
        UnsupportedTagError: the element's tag is outside the vocabulary
    """
    if isinstance(element, PreformattedString):
        return None
    if isinstance(element, NavigableString):
        return str(element)
    if not isinstance(element, Tag):
        return None

    tag = _output_tag(element)
    if not is_supported_tag(tag):
        logger.error(f"Unsanitized tag <{tag}> reached the converter")
        raise UnsupportedTagError(tag)

    children = _convert_children(element, tag)
    return NodeElement(
        tag=tag,
        attrs=_extract_attrs(element, tag),
        children=children or None,
    )


def body_to_nodes(body: Tag) -> list[Node]:
    """Convert the children of a document body, in document order."""
    return _convert_children(body, "body")
