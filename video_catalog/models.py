"""Video records as stored in the catalog and returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DraftVideo:
    """A video record before the store assigns id and created_at."""

    video_id: str
    title: str
    uploader: str
    keywords: list[str] = field(default_factory=list)
    summary: str = ""
    admin_annotation: str = ""
    view_count: Optional[int] = None

    def with_annotation(self, admin_annotation: str) -> DraftVideo:
        return replace(self, admin_annotation=admin_annotation or "")


@dataclass(frozen=True)
class VideoRecord:
    """A stored video. Immutable once created."""

    id: int
    video_id: str
    title: str
    uploader: str
    keywords: list[str]
    summary: str
    admin_annotation: str
    view_count: Optional[int]
    created_at: datetime

    @classmethod
    def from_draft(cls, draft: DraftVideo, record_id: int, created_at: datetime) -> VideoRecord:
        return cls(
            id=record_id,
            video_id=draft.video_id,
            title=draft.title,
            uploader=draft.uploader,
            keywords=list(draft.keywords),
            summary=draft.summary,
            admin_annotation=draft.admin_annotation,
            view_count=draft.view_count,
            created_at=created_at,
        )

    def to_dict(self) -> dict:
        """JSON shape served by the API. youtubeVideoId/uploader are aliases read by the frontend."""
        return {
            "id": self.id,
            "videoIdentifier": self.video_id,
            "youtubeVideoId": self.video_id,
            "title": self.title,
            "uploaderLabel": self.uploader,
            "uploader": self.uploader,
            "keywords": list(self.keywords),
            "summary": self.summary,
            "adminAnnotation": self.admin_annotation,
            "viewCount": self.view_count,
            "createdAt": self.created_at.isoformat(),
        }
