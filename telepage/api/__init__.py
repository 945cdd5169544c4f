"""Telegraph API client.

Example:
    from telepage.api import Telegraph

    async with Telegraph(access_token="...") as tph:
        pages = await tph.get_pages(limit=3)
        for page in pages.pages:
            print(page.url, page.views)

Environment Variables:
    TELEGRAPH_ACCESS_TOKEN: Token of the account to act as
    TELEGRAPH_API_ROOT: API root (e.g. https://api.graph.org mirror)
"""

from .client import Content, Telegraph
from .errors import (
    AccountConfigError,
    TelegraphApiError,
    TelegraphError,
    TelegraphRequestError,
    UploadError,
)
from .types import (
    ACCOUNT_FIELDS,
    Account,
    AccountField,
    Page,
    PageList,
    PageViews,
    RevokedToken,
)
from .upload import FileSource, is_uploaded_file, upload

__all__ = [
    # Client
    "Telegraph",
    "Content",
    # Upload
    "upload",
    "is_uploaded_file",
    "FileSource",
    # Types
    "Account",
    "AccountField",
    "ACCOUNT_FIELDS",
    "Page",
    "PageList",
    "PageViews",
    "RevokedToken",
    # Errors
    "TelegraphError",
    "TelegraphRequestError",
    "TelegraphApiError",
    "AccountConfigError",
    "UploadError",
]
