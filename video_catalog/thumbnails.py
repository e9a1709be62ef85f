"""Pass-through proxy for YouTube thumbnail images."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from urllib.parse import quote

import requests

from .errors import InvalidRequestError, ThumbnailProxyError

logger = logging.getLogger(__name__)

THUMBNAIL_URL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"
MISSING_ID_MESSAGE = "ID vidéo manquant"

# Upstream headers forwarded to the client unchanged
FORWARDED_HEADERS = (
    "Content-Type",
    "Content-Length",
    "Cache-Control",
    "Expires",
    "Last-Modified",
    "ETag",
)
CHUNK_SIZE = 8192


def thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_URL_TEMPLATE.format(video_id=quote(video_id, safe=""))


@contextmanager
def open_thumbnail(
    video_id: Optional[str],
    session: Optional[requests.Session] = None,
) -> Iterator[requests.Response]:
    """
    Open a streaming request for the thumbnail of video_id.

    The upstream response is closed when the block exits, whatever the exit path.
    Raises InvalidRequestError before any network call when video_id is empty,
    and ThumbnailProxyError when the upstream request fails.
    """
    if not video_id:
        raise InvalidRequestError(MISSING_ID_MESSAGE)

    http = session or requests
    url = thumbnail_url(video_id)
    try:
        upstream = http.get(url, stream=True)
    except requests.RequestException as e:
        logger.error("Thumbnail proxy error for %s: %s", video_id, e)
        raise ThumbnailProxyError(str(e)) from e

    try:
        yield upstream
    finally:
        upstream.close()


def forwarded_headers(upstream: requests.Response) -> dict[str, str]:
    return {name: upstream.headers[name] for name in FORWARDED_HEADERS if name in upstream.headers}


def iter_body(upstream: requests.Response, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the raw upstream body. Mid-stream failures end the stream and are logged."""
    try:
        for chunk in upstream.iter_content(chunk_size=chunk_size):
            if chunk:
                yield chunk
    except requests.RequestException as e:
        logger.error("Thumbnail stream interrupted for %s: %s", upstream.url, e)
