"""Async HTTP client base and error handling shared by the API modules."""

from .async_http_client import AsyncContextManager, BaseAsyncHttpClient
from .http_errors import safe_http_request

__all__ = [
    "AsyncContextManager",
    "BaseAsyncHttpClient",
    "safe_http_request",
]
