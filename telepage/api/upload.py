"""Upload images and videos to Telegraph's file storage.

The upload endpoint is undocumented: it takes a multipart form with a single
"photo" field and answers [{"src": "/file/<name>.<ext>"}] or
{"error": "..."}. Files up to roughly 5 MB are accepted.
"""

import logging
import os
import re
from pathlib import Path
from typing import BinaryIO, Union
from urllib.parse import urlsplit

import httpx

from telepage.config import TelegraphConfig, get_telegraph_config
from telepage.utils import safe_http_request

from .errors import UploadError

logger = logging.getLogger(__name__)

FileSource = Union[str, os.PathLike, bytes, bytearray, memoryview, BinaryIO]


def is_uploaded_file(url: str, origin: str) -> bool:
    """Check whether url already points at a file on the Telegraph origin."""
    return re.match(rf"^{re.escape(origin)}/file/.+\..+", url, re.IGNORECASE) is not None


async def _read_source(source: FileSource, client: httpx.AsyncClient) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    if isinstance(source, os.PathLike):
        path = Path(source)
        try:
            return path.read_bytes()
        except OSError as e:
            raise UploadError(f"Cannot read file '{path}': {e}", source=str(path)) from e

    if isinstance(source, str):
        parts = urlsplit(source)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise UploadError(
                "Expected an HTTP(S) URL as file source; pass a Path for local files",
                source=source,
            )
        logger.debug(f"Downloading {source} for upload")
        response = await safe_http_request(
            client, "GET", source, error_class=UploadError, follow_redirects=True
        )
        return response.content

    if hasattr(source, "read"):
        data = source.read()
        if not isinstance(data, bytes):
            raise UploadError("File object must be opened in binary mode")
        return data

    raise UploadError(f"Unsupported file source: {type(source).__name__}")


def _parse_upload_response(response: httpx.Response, origin: str) -> str:
    try:
        result = response.json()
    except ValueError as e:
        raise UploadError(f"File upload failed: invalid response: {e}") from e

    if isinstance(result, dict) and result.get("error"):
        raise UploadError(f"File upload failed: {result['error']}")
    if (
        not isinstance(result, list)
        or not result
        or not isinstance(result[0], dict)
        or not isinstance(result[0].get("src"), str)
    ):
        raise UploadError(f"File upload failed: unexpected response {result!r}")

    return f"{origin}{result[0]['src']}"


async def upload(
    source: FileSource,
    *,
    config: TelegraphConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Upload a file to Telegraph.

    Args:
        source: HTTP(S) URL to fetch, local path (os.PathLike), raw bytes, or
            a binary file object
        config: Upload endpoint and timeout (defaults to global config)
        transport: Custom httpx transport

    Returns:
        Absolute URL of the uploaded file. A URL already on the Telegraph
        origin is returned without uploading.

    Raises:
        UploadError: Source cannot be read or the upload is rejected
    """
    config = config or get_telegraph_config()
    origin = config.upload_origin

    if isinstance(source, str) and is_uploaded_file(source, origin):
        return source

    async with httpx.AsyncClient(timeout=config.timeout, transport=transport) as client:
        data = await _read_source(source, client)
        response = await safe_http_request(
            client,
            "POST",
            config.upload_url,
            error_class=UploadError,
            files={"photo": ("blob", data)},
        )

    url = _parse_upload_response(response, origin)
    logger.info(f"Uploaded {len(data)} bytes to {url}")
    return url
