"""Video record persistence: in-memory, SQLite and PostgreSQL stores."""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

import psycopg2
import psycopg2.extras

from .config import AppConfig
from .errors import StorageError
from .models import DraftVideo, VideoRecord
from .seed import STARTER_VIDEOS

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _newest_first(records: Iterable[VideoRecord]) -> list[VideoRecord]:
    return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)


class VideoStore:
    """Interface for video record storage."""

    def list_all(self) -> list[VideoRecord]:
        """Return all records, newest first. Raises StorageError."""
        raise NotImplementedError

    def insert(self, draft: DraftVideo) -> VideoRecord:
        """Persist draft, returning it with its assigned id and created_at. Raises StorageError."""
        raise NotImplementedError

    def init_schema(self) -> None:
        """Create backing tables if the store has any."""


class InMemoryVideoStore(VideoStore):
    """Process-local store. Contents are lost on restart."""

    def __init__(self, seed: Iterable[DraftVideo] = ()) -> None:
        self._records: list[VideoRecord] = []
        self._next_id = 1
        self._lock = threading.Lock()
        seed_store(self, seed)

    def list_all(self) -> list[VideoRecord]:
        with self._lock:
            return _newest_first(self._records)

    def insert(self, draft: DraftVideo) -> VideoRecord:
        with self._lock:
            record = VideoRecord.from_draft(draft, self._next_id, _utcnow())
            self._next_id += 1
            self._records.append(record)
        return record


def _init_sqlite_schema(conn: sqlite3.Connection) -> None:
    """Create tables if they don't exist."""
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS videos (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            youtube_video_id TEXT NOT NULL,
            title TEXT NOT NULL,
            uploader TEXT NOT NULL,
            keywords TEXT NOT NULL DEFAULT '[]',
            summary TEXT NOT NULL DEFAULT '',
            admin_annotation TEXT NOT NULL DEFAULT '',
            view_count INTEGER,
            created_at TEXT NOT NULL
        );
        CREATE INDEX IF NOT EXISTS idx_videos_created_at
            ON videos(created_at);
    """)


def _sqlite_row_to_record(row: sqlite3.Row) -> VideoRecord:
    return VideoRecord(
        id=row["id"],
        video_id=row["youtube_video_id"],
        title=row["title"],
        uploader=row["uploader"],
        keywords=json.loads(row["keywords"]),
        summary=row["summary"],
        admin_annotation=row["admin_annotation"],
        view_count=row["view_count"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class SqliteVideoStore(VideoStore):
    """Store backed by a local SQLite file. One connection per operation."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        _init_sqlite_schema(conn)
        return conn

    def init_schema(self) -> None:
        try:
            with closing(self._connect()):
                pass
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"could not initialize {self.db_path}: {e}") from e

    def list_all(self) -> list[VideoRecord]:
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(
                    """
                    SELECT id, youtube_video_id, title, uploader, keywords, summary,
                           admin_annotation, view_count, created_at
                    FROM videos
                    ORDER BY created_at DESC, id DESC
                    """
                ).fetchall()
            return [_sqlite_row_to_record(r) for r in rows]
        except (sqlite3.Error, OSError, ValueError) as e:
            raise StorageError(f"could not list videos: {e}") from e

    def insert(self, draft: DraftVideo) -> VideoRecord:
        created_at = _utcnow()
        try:
            with closing(self._connect()) as conn:
                cur = conn.execute(
                    """
                    INSERT INTO videos (youtube_video_id, title, uploader, keywords, summary,
                                        admin_annotation, view_count, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        draft.video_id,
                        draft.title,
                        draft.uploader,
                        json.dumps(list(draft.keywords), ensure_ascii=False),
                        draft.summary,
                        draft.admin_annotation,
                        draft.view_count,
                        created_at.isoformat(timespec="microseconds"),
                    ),
                )
                conn.commit()
                record_id = cur.lastrowid
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"could not insert video {draft.video_id}: {e}") from e
        return VideoRecord.from_draft(draft, record_id, created_at)


POSTGRES_SCHEMA = """
    CREATE TABLE IF NOT EXISTS videos (
        id SERIAL PRIMARY KEY,
        "youtubeVideoId" VARCHAR(255) NOT NULL,
        title VARCHAR(255) NOT NULL,
        uploader VARCHAR(255) NOT NULL,
        keywords TEXT[] NOT NULL DEFAULT '{}',
        summary TEXT NOT NULL DEFAULT '',
        "adminAnnotation" TEXT NOT NULL DEFAULT '',
        "viewCount" INTEGER,
        "createdAt" TIMESTAMP NOT NULL DEFAULT NOW()
    );
"""

_PG_COLUMNS = (
    'id, "youtubeVideoId", title, uploader, keywords, summary, '
    '"adminAnnotation", "viewCount", "createdAt"'
)


def _pg_row_to_record(row: dict) -> VideoRecord:
    created_at = row["createdAt"]
    if created_at.tzinfo is None:
        # Sessions run with timezone=UTC, so naive timestamps are UTC
        created_at = created_at.replace(tzinfo=timezone.utc)
    return VideoRecord(
        id=row["id"],
        video_id=row["youtubeVideoId"],
        title=row["title"],
        uploader=row["uploader"],
        keywords=list(row["keywords"] or []),
        summary=row["summary"],
        admin_annotation=row["adminAnnotation"],
        view_count=row["viewCount"],
        created_at=created_at,
    )


class PostgresVideoStore(VideoStore):
    """Store backed by a PostgreSQL `videos` table. One statement per operation."""

    def __init__(self, dsn: str, ssl_no_verify: bool = True) -> None:
        self.dsn = dsn
        self.ssl_no_verify = ssl_no_verify

    def _connect(self):
        kwargs = {
            "cursor_factory": psycopg2.extras.RealDictCursor,
            "options": "-c timezone=UTC",
        }
        if self.ssl_no_verify:
            # Encrypted, but the managed host's certificate chain is not verified
            kwargs["sslmode"] = "require"
        return psycopg2.connect(self.dsn, **kwargs)

    def init_schema(self) -> None:
        try:
            with closing(self._connect()) as conn:
                with conn, conn.cursor() as cur:
                    cur.execute(POSTGRES_SCHEMA)
        except psycopg2.Error as e:
            raise StorageError(f"could not initialize videos table: {e}") from e

    def list_all(self) -> list[VideoRecord]:
        try:
            with closing(self._connect()) as conn:
                with conn, conn.cursor() as cur:
                    cur.execute(f'SELECT {_PG_COLUMNS} FROM videos ORDER BY "createdAt" DESC, id DESC')
                    rows = cur.fetchall()
        except psycopg2.Error as e:
            raise StorageError(f"could not list videos: {e}") from e
        return [_pg_row_to_record(r) for r in rows]

    def insert(self, draft: DraftVideo) -> VideoRecord:
        try:
            with closing(self._connect()) as conn:
                with conn, conn.cursor() as cur:
                    cur.execute(
                        f"""
                        INSERT INTO videos ("youtubeVideoId", title, uploader, keywords, summary,
                                            "adminAnnotation", "viewCount")
                        VALUES (%s, %s, %s, %s, %s, %s, %s)
                        RETURNING {_PG_COLUMNS}
                        """,
                        (
                            draft.video_id,
                            draft.title,
                            draft.uploader,
                            list(draft.keywords),
                            draft.summary,
                            draft.admin_annotation,
                            draft.view_count,
                        ),
                    )
                    row = cur.fetchone()
        except psycopg2.Error as e:
            raise StorageError(f"could not insert video {draft.video_id}: {e}") from e
        return _pg_row_to_record(row)


def seed_store(store: VideoStore, drafts: Iterable[DraftVideo]) -> int:
    """
    Insert drafts into an empty store. Returns the number inserted.

    Drafts are inserted last-to-first so that listing (newest first) returns
    them in the given order. A store that already holds records is left alone.
    """
    drafts = list(drafts)
    if not drafts or store.list_all():
        return 0
    for draft in reversed(drafts):
        store.insert(draft)
    return len(drafts)


def create_store(config: AppConfig, seed: Iterable[DraftVideo] = STARTER_VIDEOS) -> VideoStore:
    """Select the store implementation from config.database_url."""
    url = (config.database_url or "").strip()

    if url.startswith(("postgres://", "postgresql://")):
        logger.info("Using PostgreSQL video store")
        return PostgresVideoStore(url, ssl_no_verify=config.db_ssl_no_verify)

    if url.startswith("sqlite:///"):
        path = Path(url[len("sqlite:///"):])
        logger.info("Using SQLite video store at %s", path)
        return SqliteVideoStore(path)

    if url:
        raise ValueError(f"Unsupported DATABASE_URL scheme: {url.split(':', 1)[0]}")

    logger.info("Using in-memory video store (seeded=%s)", config.seed_catalog)
    if config.seed_catalog:
        return InMemoryVideoStore(seed=seed)
    return InMemoryVideoStore()
