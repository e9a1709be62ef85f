"""Extensible URL parser for video platforms. Recognizes video URLs and extracts IDs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import ParseResult, parse_qs, urlparse


@dataclass
class ParsedVideo:
    """Parsed video from a supported platform URL."""

    platform: str
    video_id: str
    original_url: str


def _split_url(url: object) -> Optional[ParseResult]:
    """Parse url, returning None unless it has both a scheme and a host."""
    if not url or not isinstance(url, str):
        return None
    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname
    except ValueError:
        # Malformed netloc, e.g. an unclosed IPv6 bracket or bad port
        return None
    if not parsed.scheme or not host:
        return None
    return parsed


def is_valid_url(url: object) -> bool:
    """Return True if url is syntactically usable (scheme and host present)."""
    return _split_url(url) is not None


class PlatformHandler:
    """Interface for platform-specific URL parsers."""

    platform = ""

    def can_handle(self, parsed: ParseResult) -> bool:
        """Return True if this handler recognizes the URL's host."""
        raise NotImplementedError

    def extract_id(self, parsed: ParseResult) -> Optional[str]:
        """Return the video ID, or None if the URL carries none."""
        raise NotImplementedError


class YouTubeHandler(PlatformHandler):
    """Extract the video ID from youtu.be, watch and embed URLs."""

    platform = "youtube"

    _SHORT_HOST = "youtu.be"
    _HOST_FRAGMENT = "youtube.com"

    def can_handle(self, parsed: ParseResult) -> bool:
        host = parsed.hostname or ""
        return host == self._SHORT_HOST or self._HOST_FRAGMENT in host

    def extract_id(self, parsed: ParseResult) -> Optional[str]:
        host = parsed.hostname or ""
        path = parsed.path

        # youtu.be/VIDEO_ID
        if host == self._SHORT_HOST:
            return path[1:].split("/")[0]

        if self._HOST_FRAGMENT not in host:
            return None

        # youtube.com/watch?v=VIDEO_ID
        if path == "/watch":
            values = parse_qs(parsed.query).get("v")
            return values[0] if values else None

        # youtube.com/embed/VIDEO_ID
        if path.startswith("/embed/"):
            return path.split("/")[2]

        return None


# Registry of platform handlers
_PLATFORM_HANDLERS: list[PlatformHandler] = [YouTubeHandler()]


def register_handler(handler: PlatformHandler) -> None:
    """Register a platform handler for another video host."""
    _PLATFORM_HANDLERS.append(handler)


def parse_video_url(url: object) -> Optional[ParsedVideo]:
    """
    Parse a full video URL and return ParsedVideo if supported.

    Returns None for unsupported URLs, URLs without an ID, and strings that
    are not URLs at all. Never raises.
    """
    parsed = _split_url(url)
    if parsed is None:
        return None

    for handler in _PLATFORM_HANDLERS:
        if not handler.can_handle(parsed):
            continue
        video_id = handler.extract_id(parsed)
        if video_id:
            return ParsedVideo(
                platform=handler.platform,
                video_id=video_id,
                original_url=url.strip(),
            )

    return None
