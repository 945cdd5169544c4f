"""Async client for the Telegraph API.

Every method maps to one API call (https://telegra.ph/api#Available-methods).
Calls are POSTed as JSON to <api_root>/<method> with the account's access
token attached; the API answers {"ok": true, "result": ...} or
{"ok": false, "error": "..."}.
"""

import logging
from typing import Any, Sequence

import httpx

from telepage.config import TelegraphConfig, get_telegraph_config
from telepage.content import Node, ParseMode, dump_node, parse
from telepage.utils import BaseAsyncHttpClient, safe_http_request

from .errors import AccountConfigError, TelegraphApiError, TelegraphRequestError
from .types import ACCOUNT_FIELDS, Account, AccountField, Page, PageList, PageViews, RevokedToken
from .upload import FileSource, upload

logger = logging.getLogger(__name__)

# Node objects, raw node dicts, or a single string
Content = str | Sequence[Node | dict]


def _content_payload(content: Content, parse_mode: ParseMode | str | None) -> list[str | dict]:
    if parse_mode is not None:
        if not isinstance(content, str):
            raise TypeError("parse_mode requires string content")
        content = parse(content, parse_mode)
    if isinstance(content, str):
        return [content]
    return [node if isinstance(node, dict) else dump_node(node) for node in content]


class Telegraph(BaseAsyncHttpClient):
    """Telegraph account and page management.

    Usage:
        async with Telegraph(short_name="Sandbox", author_name="Anonymous") as tph:
            await tph.setup_account()
            page = await tph.create(
                "Sample Page",
                "Hello, **world**!",
                parse_mode="Markdown",
            )
            print(page.url)

    An existing account is reused by passing its token (or setting
    TELEGRAPH_ACCESS_TOKEN). Passing a token together with account details
    makes setup_account() update those details.
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        short_name: str | None = None,
        author_name: str | None = None,
        author_url: str | None = None,
        config: TelegraphConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config or get_telegraph_config()
        super().__init__(
            base_url=self._config.api_root,
            timeout=self._config.timeout,
            transport=transport,
        )
        self.token = access_token or self._config.access_token
        self.short_name = short_name
        self.author_name = author_name
        self.author_url = author_url

    async def _request(self, method: str, payload: dict[str, Any] | None = None) -> Any:
        """Call an API method and return its result.

        None-valued payload fields are omitted.

        Raises:
            TelegraphRequestError: Transport or HTTP failure, or non-JSON body
            TelegraphApiError: The API reported an error
        """
        body: dict[str, Any] = {"access_token": self.token} if self.token else {}
        body.update({key: value for key, value in (payload or {}).items() if value is not None})

        client = await self._get_client()
        response = await safe_http_request(
            client,
            "POST",
            f"/{method}",
            error_class=TelegraphRequestError,
            json=body,
        )

        try:
            data = response.json()
        except ValueError as e:
            raise TelegraphRequestError(f"Invalid JSON response: {e}", method=method) from e

        if not isinstance(data, dict) or not data.get("ok"):
            error = data.get("error", "Unknown error") if isinstance(data, dict) else repr(data)
            logger.warning(f"Telegraph {method} failed: {error}")
            raise TelegraphApiError(error, method=method)

        logger.debug(f"Telegraph {method} succeeded")
        return data.get("result")

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    async def create_account(
        self,
        short_name: str,
        author_name: str | None = None,
        author_url: str | None = None,
    ) -> Account:
        """Create a new account and switch this client to its token."""
        result = await self._request(
            "createAccount",
            {"short_name": short_name, "author_name": author_name, "author_url": author_url},
        )
        account = Account.model_validate(result)
        if account.access_token:
            self.token = account.access_token
        logger.info(f"Created Telegraph account {account.short_name!r}")
        return account

    async def edit_account(
        self,
        short_name: str | None = None,
        author_name: str | None = None,
        author_url: str | None = None,
    ) -> Account:
        """Update account details; omitted fields keep their current value."""
        result = await self._request(
            "editAccountInfo",
            {"short_name": short_name, "author_name": author_name, "author_url": author_url},
        )
        return Account.model_validate(result)

    async def get_account(self, fields: Sequence[AccountField] = ACCOUNT_FIELDS) -> Account:
        result = await self._request("getAccountInfo", {"fields": list(fields)})
        return Account.model_validate(result)

    async def revoke_token(self, save: bool = True) -> RevokedToken:
        """Revoke the access token and get a new one.

        Args:
            save: Switch this client to the new token

        Returns:
            RevokedToken with the new access_token and auth_url
        """
        result = await self._request("revokeAccessToken")
        credentials = RevokedToken.model_validate(result)
        if save:
            self.token = credentials.access_token
        logger.info("Revoked Telegraph access token")
        return credentials

    async def setup_account(self) -> Account:
        """Create, update or load the account this client was built for.

        - token and any account detail: edit the account with those details
        - no token but a short_name: create a new account
        - token only: fetch the account

        Raises:
            AccountConfigError: Neither a token nor a short_name is available
        """
        details = {
            "short_name": self.short_name,
            "author_name": self.author_name,
            "author_url": self.author_url,
        }
        if self.token and any(details.values()):
            return await self.edit_account(**details)
        if not self.token and self.short_name:
            return await self.create_account(**details)
        if self.token:
            return await self.get_account()
        raise AccountConfigError(
            "No access token or short_name given; cannot create or connect an account"
        )

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    async def create(
        self,
        title: str,
        content: Content,
        author_name: str | None = None,
        author_url: str | None = None,
        return_content: bool = False,
        parse_mode: ParseMode | str | None = None,
    ) -> Page:
        """Create a page.

        Args:
            title: Page title (1-256 characters)
            content: Nodes, or a string. With parse_mode the string is
                converted from HTML/Markdown; without it the string becomes
                a single text node.
            author_name: Overrides the account's author name
            author_url: Overrides the account's author URL
            return_content: Include content in the returned Page
            parse_mode: "HTML" or "Markdown"
        """
        result = await self._request(
            "createPage",
            {
                "title": title,
                "content": _content_payload(content, parse_mode),
                "author_name": author_name,
                "author_url": author_url,
                "return_content": return_content,
            },
        )
        page = Page.model_validate(result)
        logger.info(f"Created page {page.path}")
        return page

    async def edit(
        self,
        path: str,
        content: Content,
        title: str | None = None,
        author_name: str | None = None,
        author_url: str | None = None,
        return_content: bool = False,
        parse_mode: ParseMode | str | None = None,
    ) -> Page:
        """Replace a page's content. Without a title the current one is kept."""
        if title is None:
            title = (await self.get(path, return_content=False)).title

        result = await self._request(
            "editPage",
            {
                "path": path,
                "title": title,
                "content": _content_payload(content, parse_mode),
                "author_name": author_name,
                "author_url": author_url,
                "return_content": return_content,
            },
        )
        return Page.model_validate(result)

    async def get(self, path: str, return_content: bool = True) -> Page:
        result = await self._request(
            "getPage", {"path": path, "return_content": return_content}
        )
        return Page.model_validate(result)

    async def get_pages(self, offset: int = 0, limit: int = 50) -> PageList:
        """List the account's pages (limit 0-200)."""
        result = await self._request("getPageList", {"offset": offset, "limit": limit})
        return PageList.model_validate(result)

    async def get_views(
        self,
        path: str,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> PageViews:
        """Get view count for a page, optionally narrowed to a year/month/day/hour."""
        result = await self._request(
            "getViews",
            {"path": path, "year": year, "month": month, "day": day, "hour": hour},
        )
        return PageViews.model_validate(result)

    async def upload(self, source: FileSource) -> str:
        """Upload a file to Telegraph and return its URL."""
        return await upload(source, config=self._config, transport=self._transport)
