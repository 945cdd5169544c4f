"""Tags and attributes Telegraph accepts in page content.

See https://telegra.ph/api#NodeElement
"""

from typing import Literal, get_args

SupportedTag = Literal[
    "a", "aside", "b", "blockquote", "br", "code", "em", "figcaption",
    "figure", "h3", "h4", "hr", "i", "iframe", "img", "li", "ol", "p",
    "pre", "s", "strong", "u", "ul", "video",
]  # fmt: skip

SUPPORTED_TAGS: frozenset[str] = frozenset(get_args(SupportedTag))

# Telegraph has two heading sizes and spells strikethrough as <s>
TAG_RENAMES: dict[str, str] = {
    "h1": "h3",
    "h2": "h4",
    "h5": "h3",
    "h6": "h4",
    "del": "s",
}

ALLOWED_ATTRIBUTES: dict[str, list[str]] = {
    "a": ["href"],
    "img": ["src"],
    "iframe": ["src"],
    "video": ["src"],
}

# Elements whose surrounding whitespace-only text carries no meaning
BLOCK_TAGS: frozenset[str] = frozenset({
    "aside", "blockquote", "figcaption", "figure", "h3", "h4", "hr",
    "iframe", "li", "ol", "p", "pre", "ul", "video",
})

VOID_TAGS: frozenset[str] = frozenset({"br", "hr", "img"})


def is_supported_tag(tag: str) -> bool:
    """Check whether Telegraph renders this tag."""
    return tag.lower() in SUPPORTED_TAGS


def attribute_allow_list(tag: str) -> frozenset[str]:
    """Attributes kept on this tag by sanitization (empty for most tags)."""
    return frozenset(ALLOWED_ATTRIBUTES.get(tag.lower(), ()))
