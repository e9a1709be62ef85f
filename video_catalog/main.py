"""Main entry point - loads configuration, selects the store and runs the web server."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from .config import AppConfig
from .errors import StorageError
from .seed import STARTER_VIDEOS
from .store import create_store, seed_store
from .web.app import run_web_server

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # urllib3 logs every upstream connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Video catalog backend")
    parser.add_argument("--port", type=int, help="Override the PORT environment variable")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Load the starter catalog into the database if it is empty",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the video catalog service."""
    load_dotenv()
    args = _parse_args(argv)
    config = AppConfig.from_env()
    if args.port:
        config.port = args.port
    _configure_logging(config.log_level)

    try:
        store = create_store(config)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    try:
        store.init_schema()
        if args.seed:
            added = seed_store(store, STARTER_VIDEOS)
            logger.info("Loaded %d starter videos", added)
    except StorageError as e:
        # Keep serving; list and insert will report the storage error per request
        logger.error("Database initialization failed: %s", e)

    if not config.youtube_api_key:
        logger.info("YOUTUBE_API_KEY not set; new videos get placeholder metadata")

    logger.info("Serveur backend démarré sur http://localhost:%d", config.port)
    run_web_server(config, store=store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
