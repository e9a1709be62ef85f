"""Fetch video metadata from the YouTube Data API and merge it into draft records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

import requests

from .models import DraftVideo

logger = logging.getLogger(__name__)

YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"

PLACEHOLDER_UPLOADER = "Chaîne YouTube (Simulée)"
PLACEHOLDER_KEYWORDS = ("IA (Simulé)", "Keyword 2", "Keyword 3", "Keyword 4", "Keyword 5")
PLACEHOLDER_SUMMARY = (
    "Ceci est un résumé simulé généré par IA pour la vidéo {video_id}. Le système aurait "
    "normalement téléchargé la transcription, l'aurait envoyée à Gemini pour analyse, "
    "puis aurait renvoyé ce résumé en français."
)


@dataclass(frozen=True)
class VideoMetadata:
    """Authoritative fields returned by the metadata API."""

    title: str
    channel_title: str
    view_count: Optional[int]


@dataclass(frozen=True)
class EnrichmentResult:
    """Outcome of one metadata fetch: metadata on success, error text on failure."""

    metadata: Optional[VideoMetadata] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.metadata is not None

    @classmethod
    def failure(cls, error: str) -> EnrichmentResult:
        return cls(metadata=None, error=error)


MetadataFetcher = Callable[[str, str], EnrichmentResult]


def format_uploader_label(channel: str, view_count: Optional[int]) -> str:
    """Combine channel and view count, e.g. 'Feu de Bengale • 215K vues'."""
    if view_count:
        # Halves round up
        return f"{channel} • {(view_count + 500) // 1000}K vues"
    return f"{channel} • N/A vues"


def placeholder_metadata(video_id: str) -> DraftVideo:
    """Stand-in draft used when enrichment is skipped or fails."""
    return DraftVideo(
        video_id=video_id,
        title=f"Titre récupéré de YouTube (Simulé) - {video_id}",
        uploader=PLACEHOLDER_UPLOADER,
        keywords=list(PLACEHOLDER_KEYWORDS),
        summary=PLACEHOLDER_SUMMARY.format(video_id=video_id),
        view_count=None,
    )


def _parse_view_count(raw) -> Optional[int]:
    if raw is None:
        return None
    count = int(raw)
    if count < 0:
        raise ValueError(f"negative view count {count}")
    return count


def fetch_video_metadata(
    video_id: str,
    api_key: str,
    session: Optional[requests.Session] = None,
) -> EnrichmentResult:
    """
    Fetch title, channel and view count for one video.

    Issues a single request with the transport's default timeout. Any failure
    (network, HTTP status, malformed body, no matching item) is logged and
    returned as a failed result; this function never raises.
    """
    http = session or requests
    params = {
        "id": video_id,
        "part": "snippet,statistics",
        "key": api_key,
    }
    try:
        resp = http.get(YOUTUBE_VIDEOS_URL, params=params)
        resp.raise_for_status()
        data = resp.json()
        item = data["items"][0]
        snippet = item["snippet"]
        metadata = VideoMetadata(
            title=snippet["title"],
            channel_title=snippet["channelTitle"],
            view_count=_parse_view_count(item.get("statistics", {}).get("viewCount")),
        )
    except requests.RequestException as e:
        logger.warning("YouTube API request failed for %s: %s", video_id, e)
        return EnrichmentResult.failure(str(e))
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.warning("Unexpected YouTube API response for %s: %r", video_id, e)
        return EnrichmentResult.failure(f"malformed response: {e!r}")

    return EnrichmentResult(metadata=metadata)


def merge_metadata(draft: DraftVideo, result: EnrichmentResult) -> DraftVideo:
    """Overwrite title, uploader and view count with fetched values when the fetch succeeded."""
    if not result.ok:
        return draft
    meta = result.metadata
    return replace(
        draft,
        title=meta.title,
        uploader=meta.channel_title,
        view_count=meta.view_count,
    )


def enrich(
    video_id: str,
    api_key: Optional[str],
    fetch: MetadataFetcher = fetch_video_metadata,
) -> DraftVideo:
    """
    Build the draft for video_id, enriched with API metadata when a key is set.

    The uploader field of the returned draft is the final display label.
    """
    draft = placeholder_metadata(video_id)
    if api_key:
        draft = merge_metadata(draft, fetch(video_id, api_key))
    else:
        logger.debug("No YouTube API key configured, using placeholder metadata for %s", video_id)
    return replace(draft, uploader=format_uploader_label(draft.uploader, draft.view_count))
