"""Render Telegraph nodes back to HTML."""

from html import escape

from .nodes import Node
from .tags import VOID_TAGS


def node_to_html(node: Node) -> str:
    if isinstance(node, str):
        return escape(node, quote=False)

    attrs = ""
    if node.attrs is not None:
        for name, value in node.attrs.model_dump(exclude_none=True).items():
            attrs += f' {name}="{escape(value)}"'

    if node.tag in VOID_TAGS and not node.children:
        return f"<{node.tag}{attrs}>"

    inner = "".join(node_to_html(child) for child in node.children or ())
    if node.tag == "pre" and inner.startswith("\n"):
        # HTML parsers drop one newline directly after <pre>
        inner = "\n" + inner
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def nodes_to_html(nodes: str | list[Node]) -> str:
    """Serialize parse() output (bare text or node list) to an HTML fragment."""
    if isinstance(nodes, str):
        return escape(nodes, quote=False)
    return "".join(node_to_html(node) for node in nodes)
