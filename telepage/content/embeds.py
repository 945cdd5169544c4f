"""Rewrite third-party media URLs into Telegraph embed proxy paths.

Telegraph frames tweets, YouTube and Vimeo videos and Telegram posts through
``/embed/<site>?url=<encoded url>`` instead of loading the original page.
Rules are tried in a fixed order (Twitter, YouTube, Vimeo, Telegram) and the
first match wins, even if a later rule would also match.
The scheme is optional, so protocol-relative (//host/...) iframe sources match.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable
from urllib.parse import quote

logger = logging.getLogger(__name__)

# twitter.com/<user>/status/<id>, x.com/i/web/status/<id>, ...
TWITTER_PATTERN = re.compile(
    r"^(?:(?:https?:)?//)?(?:www\.|mobile\.)?(?:twitter|x)\.com/(?:\w+/)*status(?:es)?/\d+",
    re.IGNORECASE,
)

# watch?v=, watch?feature=x&v=, /embed/, /v/, /shorts/, /live/ and youtu.be short links
YOUTUBE_PATTERN = re.compile(
    r"""
    ^(?:(?:https?:)?//)?
    (?:
        (?:www\.|m\.)?youtube(?:-nocookie)?\.com/
        (?:
            (?:embed|v|vi|shorts|live)/
            |(?:watch)?\?(?:[^#]*&)?vi?=
        )
        |youtu\.be/
    )
    (?P<video_id>[^#&?/]+)
    """,
    re.IGNORECASE | re.VERBOSE,
)

# vimeo.com/<id>, player.vimeo.com/video/<id>, vimeo.com/channels/<name>/<id>
VIMEO_PATTERN = re.compile(
    r"^(?:(?:https?:)?//)?(?:www\.)?(?:player\.)?vimeo\.com/(?:[a-z]*/)*(?P<video_id>[0-9]{6,11})(?![0-9])",
    re.IGNORECASE,
)

# t.me/<channel>/<post id> and its telegram.me / telegram.dog mirrors
TELEGRAM_PATTERN = re.compile(
    r"^(?:https?:)?//(?:t\.me|telegram\.me|telegram\.dog)/(?P<channel>[a-zA-Z0-9_]+)/(?P<post_id>\d+)",
    re.IGNORECASE,
)


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way JavaScript's encodeURIComponent does."""
    return quote(value, safe="!'()*")


@dataclass(frozen=True)
class EmbedRule:
    """A platform whose URLs Telegraph can embed."""

    site: str
    pattern: re.Pattern[str]
    # Builds the URL handed to the proxy from a successful match
    target_url: Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class EmbedMatch:
    """Result of matching a URL against the embed rules."""

    site: str
    url: str

    @property
    def embed_path(self) -> str:
        return f"/embed/{self.site}?url={encode_uri_component(self.url)}"


EMBED_RULES: tuple[EmbedRule, ...] = (
    EmbedRule("twitter", TWITTER_PATTERN, lambda m: m.string),
    EmbedRule(
        "youtube",
        YOUTUBE_PATTERN,
        lambda m: f"https://www.youtube.com/watch?v={m.group('video_id')}",
    ),
    EmbedRule(
        "vimeo",
        VIMEO_PATTERN,
        lambda m: f"https://vimeo.com/{m.group('video_id')}",
    ),
    EmbedRule("telegram", TELEGRAM_PATTERN, lambda m: m.string),
)


def match_embed(url: str) -> EmbedMatch | None:
    """Find the first embed rule matching url.

    Args:
        url: Any string, typically an iframe src

    Returns:
        EmbedMatch with the site name and proxied URL, or None
    """
    for rule in EMBED_RULES:
        match = rule.pattern.search(url)
        if match:
            return EmbedMatch(site=rule.site, url=rule.target_url(match))
    return None


def classify(url: str) -> str:
    """Return the embed proxy path for a known media URL, else url unchanged."""
    embed = match_embed(url)
    if embed is None:
        return url
    logger.debug(f"Rewrote {embed.site} URL {url!r} to embed path")
    return embed.embed_path
