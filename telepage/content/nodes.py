"""Node tree Telegraph uses for page content.

See https://telegra.ph/api#Node
"""

from typing import Union

from pydantic import BaseModel, ConfigDict

from .tags import SupportedTag


class NodeAttrs(BaseModel):
    """Attributes carried by a node element (Telegraph only reads these two)."""

    model_config = ConfigDict(frozen=True)

    href: str | None = None
    src: str | None = None


class NodeElement(BaseModel):
    """A DOM element: tag, optional attributes, optional children."""

    model_config = ConfigDict(frozen=True)

    tag: SupportedTag
    attrs: NodeAttrs | None = None
    children: list["Node"] | None = None


# A text node is a plain string
Node = Union[str, NodeElement]

NodeElement.model_rebuild()


def dump_node(node: Node) -> str | dict:
    """Convert a node to the JSON-ready form the API expects."""
    if isinstance(node, str):
        return node
    return node.model_dump(exclude_none=True)


def dump_nodes(nodes: list[Node]) -> list[str | dict]:
    return [dump_node(node) for node in nodes]
