"""Application configuration read from the process environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"

# Default config values
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_CORS_ORIGINS = "*"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class AppConfig:
    """Application configuration."""

    port: int
    host: str
    youtube_api_key: Optional[str]
    database_url: Optional[str]
    db_ssl_no_verify: bool
    cors_origins: str
    static_dir: Path
    seed_catalog: bool
    log_level: str
    debug: bool

    @classmethod
    def defaults(cls) -> AppConfig:
        return cls(
            port=DEFAULT_PORT,
            host=DEFAULT_HOST,
            youtube_api_key=None,
            database_url=None,
            db_ssl_no_verify=True,
            cors_origins=DEFAULT_CORS_ORIGINS,
            static_dir=DEFAULT_STATIC_DIR,
            seed_catalog=True,
            log_level=DEFAULT_LOG_LEVEL,
            debug=False,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            port=_int_value(env, "PORT", DEFAULT_PORT),
            host=env.get("HOST") or DEFAULT_HOST,
            youtube_api_key=env.get("YOUTUBE_API_KEY") or None,
            database_url=env.get("DATABASE_URL") or None,
            db_ssl_no_verify=_bool_value(env, "DB_SSL_NO_VERIFY", True),
            cors_origins=env.get("CORS_ORIGINS") or DEFAULT_CORS_ORIGINS,
            static_dir=Path(env["STATIC_DIR"]) if env.get("STATIC_DIR") else DEFAULT_STATIC_DIR,
            seed_catalog=_bool_value(env, "SEED_CATALOG", True),
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            debug=_bool_value(env, "DEBUG", False),
        )

    def allowed_origins(self):
        """CORS origins: '*' or a list of explicit origins."""
        if self.cors_origins.strip() == "*":
            return "*"
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def _int_value(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %d", key, raw, default)
        return default


def _bool_value(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("true", "1", "yes")
