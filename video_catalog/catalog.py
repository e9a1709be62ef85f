"""Add-video pipeline: parse URL, enrich, persist."""

from __future__ import annotations

import logging
from typing import Optional

from .enrichment import MetadataFetcher, enrich, fetch_video_metadata
from .errors import InvalidRequestError
from .models import VideoRecord
from .store import VideoStore
from .url_parser import is_valid_url, parse_video_url

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "URL YouTube invalide."
NO_VIDEO_ID_MESSAGE = "Impossible d'extraire l'ID vidéo de l'URL."


def add_video(
    store: VideoStore,
    video_url: object,
    admin_annotation: Optional[str] = "",
    api_key: Optional[str] = None,
    fetch: MetadataFetcher = fetch_video_metadata,
) -> VideoRecord:
    """
    Create a catalog entry from a video URL.

    Raises InvalidRequestError for a missing/invalid URL or one without a
    video ID; nothing is stored in that case. Storage failures propagate as
    StorageError. Enrichment failures fall back to placeholder metadata.
    """
    if not is_valid_url(video_url):
        raise InvalidRequestError(INVALID_URL_MESSAGE)

    parsed = parse_video_url(video_url)
    if not parsed:
        raise InvalidRequestError(NO_VIDEO_ID_MESSAGE)

    draft = enrich(parsed.video_id, api_key, fetch=fetch)
    draft = draft.with_annotation(admin_annotation if isinstance(admin_annotation, str) else "")

    record = store.insert(draft)
    logger.info("Added video %s (id=%s): %s", record.video_id, record.id, record.title)
    return record
