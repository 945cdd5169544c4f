"""Turn httpx failures into the calling module's exception type."""

import logging
from typing import Any, Type

import httpx

logger = logging.getLogger(__name__)


def _describe_failure(error: httpx.HTTPError) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return f"HTTP {response.status_code}: {response.reason_phrase}"
    if isinstance(error, httpx.ConnectError):
        return f"Connection failed: {error}"
    if isinstance(error, httpx.TimeoutException):
        return f"Request timeout: {error}"
    return f"Request failed: {error}"


async def safe_http_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    error_class: Type[Exception],
    **kwargs: Any,
) -> httpx.Response:
    """
    Send one request and raise error_class unless it returns a 2xx response.

    Args:
        client: httpx.AsyncClient instance
        method: HTTP method (GET, POST, etc.)
        path: Path relative to the client's base_url, or an absolute URL
        error_class: Exception raised on failure; receives the message only
        **kwargs: Passed to client.request (json=, files=, ...)

    Returns:
        The successful response

    Raises:
        error_class: Connection, timeout, status or other transport error
    """
    try:
        response = await client.request(method, path, **kwargs)
        response.raise_for_status()
    except httpx.HTTPError as e:
        message = _describe_failure(e)
        logger.error(f"{method} {client.base_url}{path} failed: {message}")
        raise error_class(message) from e

    logger.debug(f"{method} {client.base_url}{path} -> {response.status_code}")
    return response
