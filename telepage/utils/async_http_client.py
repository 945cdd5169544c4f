"""Lazily created httpx.AsyncClient shared by the API modules."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "telepage (+https://telegra.ph/api)"


class AsyncContextManager:
    """`async with` support for objects that own a close() coroutine."""

    async def close(self) -> None:
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class BaseAsyncHttpClient(AsyncContextManager):
    """
    Owns one httpx.AsyncClient for a base URL.

    The client is created on first use and recreated if it was closed, so
    an instance can be used again after leaving an `async with` block.
    Tests pass an httpx.MockTransport as `transport`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None and not self._client.is_closed

    async def _get_client(self) -> httpx.AsyncClient:
        if not self.is_open:
            logger.debug(f"Opening HTTP client for {self.base_url}")
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    async def close(self) -> None:
        if self.is_open:
            await self._client.aclose()
        self._client = None
