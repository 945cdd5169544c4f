"""Telegraph publishing client with HTML/Markdown content conversion.

Example:
    from telepage import Telegraph, parse

    nodes = parse("# Hello\n\nFirst **post**.", "Markdown")

    async with Telegraph(short_name="Sandbox") as tph:
        await tph.setup_account()
        page = await tph.create("Hello", nodes)
        print(page.url)
"""

from .api import (
    Account,
    Page,
    PageList,
    PageViews,
    RevokedToken,
    Telegraph,
    TelegraphApiError,
    TelegraphError,
    TelegraphRequestError,
    UploadError,
    upload,
)
from .config import TelegraphConfig, get_telegraph_config
from .content import (
    ContentError,
    DomParseFailure,
    EmptyContent,
    InvalidParseMode,
    Node,
    NodeAttrs,
    NodeElement,
    ParseMode,
    nodes_to_html,
    parse,
)

__all__ = [
    "Telegraph",
    "upload",
    "parse",
    "nodes_to_html",
    "ParseMode",
    "TelegraphConfig",
    "get_telegraph_config",
    # Types
    "Account",
    "Page",
    "PageList",
    "PageViews",
    "RevokedToken",
    "Node",
    "NodeAttrs",
    "NodeElement",
    # Errors
    "TelegraphError",
    "TelegraphRequestError",
    "TelegraphApiError",
    "UploadError",
    "ContentError",
    "InvalidParseMode",
    "DomParseFailure",
    "EmptyContent",
]
