"""Configuration for the Telegraph client.

Values default from the environment (a .env file is loaded on import), so
scripts can run with nothing but TELEGRAPH_ACCESS_TOKEN exported.
"""

import os
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_ROOT = "https://api.telegra.ph"
DEFAULT_UPLOAD_URL = "https://telegra.ph/upload"


@dataclass
class TelegraphConfig:
    """Configuration for the Telegraph API client and upload helper.

    Environment Variables:
        TELEGRAPH_ACCESS_TOKEN: Access token of an existing account
        TELEGRAPH_API_ROOT: API root (default: https://api.telegra.ph)
        TELEGRAPH_UPLOAD_URL: Upload endpoint (default: https://telegra.ph/upload)
        TELEGRAPH_TIMEOUT: Request timeout in seconds (default: 30)
    """

    access_token: str | None = field(
        default_factory=lambda: os.environ.get("TELEGRAPH_ACCESS_TOKEN") or None
    )
    api_root: str = field(
        default_factory=lambda: os.environ.get("TELEGRAPH_API_ROOT", DEFAULT_API_ROOT)
    )
    upload_url: str = field(
        default_factory=lambda: os.environ.get("TELEGRAPH_UPLOAD_URL", DEFAULT_UPLOAD_URL)
    )
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("TELEGRAPH_TIMEOUT", "30"))
    )

    @property
    def has_token(self) -> bool:
        """Check if an access token is configured."""
        return bool(self.access_token)

    @property
    def upload_origin(self) -> str:
        """Scheme and host of the upload endpoint, e.g. https://telegra.ph."""
        parts = urlsplit(self.upload_url)
        return f"{parts.scheme}://{parts.netloc}"


_config: TelegraphConfig | None = None


def get_telegraph_config() -> TelegraphConfig:
    """Get global TelegraphConfig instance."""
    global _config
    if _config is None:
        _config = TelegraphConfig()
    return _config
