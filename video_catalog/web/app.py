"""Flask JSON API for the video catalog."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from functools import partial
from typing import Optional

import requests
from flask import Flask, Response, jsonify, request, send_from_directory
from flask_cors import CORS

from ..catalog import add_video
from ..config import AppConfig
from ..enrichment import MetadataFetcher, fetch_video_metadata
from ..errors import InvalidRequestError, StorageError, ThumbnailProxyError
from ..store import VideoStore, create_store
from ..thumbnails import forwarded_headers, iter_body, open_thumbnail

logger = logging.getLogger(__name__)

LIVENESS_MESSAGE = "Serveur Backend ISC - En ligne et opérationnel!"
STORAGE_ERROR_MESSAGE = "Erreur lors de l'enregistrement de la vidéo."
LIST_ERROR_MESSAGE = "Erreur lors de la récupération des vidéos."
PROXY_ERROR_MESSAGE = "Erreur proxy"
FALLBACK_PAGE = "index.html"


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[VideoStore] = None,
    http_session: Optional[requests.Session] = None,
    fetch_metadata: Optional[MetadataFetcher] = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or AppConfig.defaults()
    store = store if store is not None else create_store(config)
    # Module-level requests calls open a fresh session per request, so threads share nothing
    http = http_session or requests
    fetch = fetch_metadata or partial(fetch_video_metadata, session=http)

    app = Flask(__name__, static_folder=str(config.static_dir), static_url_path="")
    app.config["DEBUG"] = config.debug
    app.json.ensure_ascii = False
    CORS(app, resources={r"/*": {"origins": config.allowed_origins()}})

    @app.errorhandler(StorageError)
    def storage_error(e: StorageError):
        logger.exception("Storage error: %s", e)
        return jsonify(message=STORAGE_ERROR_MESSAGE), 500

    @app.errorhandler(404)
    def fallback_page(e):
        """Serve the single-page frontend for any unmatched route."""
        if (config.static_dir / FALLBACK_PAGE).is_file():
            return send_from_directory(config.static_dir, FALLBACK_PAGE)
        return "Not Found", 404

    @app.route("/")
    def index():
        return LIVENESS_MESSAGE

    @app.route("/api/videos")
    def list_videos():
        try:
            records = store.list_all()
        except StorageError as e:
            logger.exception("Could not list videos: %s", e)
            return jsonify(message=LIST_ERROR_MESSAGE), 500
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/add-video", methods=["POST"])
    def add_video_route():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        try:
            record = add_video(
                store,
                body.get("videoUrl"),
                admin_annotation=body.get("adminAnnotation", ""),
                api_key=config.youtube_api_key,
                fetch=fetch,
            )
        except InvalidRequestError as e:
            logger.info("Rejected add-video request: %s", e.message)
            return jsonify(message=e.message), 400
        return jsonify(record.to_dict()), 201

    @app.route("/api/thumbnail")
    def thumbnail():
        """Stream the upstream thumbnail with its status and content headers."""
        stack = ExitStack()
        try:
            upstream = stack.enter_context(open_thumbnail(request.args.get("v"), session=http))
        except InvalidRequestError as e:
            return e.message, 400, {"Content-Type": "text/plain; charset=utf-8"}
        except ThumbnailProxyError:
            return PROXY_ERROR_MESSAGE, 500, {"Content-Type": "text/plain; charset=utf-8"}

        try:
            response = Response(
                iter_body(upstream),
                status=upstream.status_code,
                headers=forwarded_headers(upstream),
            )
        except Exception:
            stack.close()
            raise
        response.call_on_close(stack.close)
        return response

    return app


def run_web_server(config: AppConfig, store: Optional[VideoStore] = None) -> None:
    """Run the Flask development server."""
    app = create_app(config=config, store=store)
    app.run(host=config.host, port=config.port, threaded=True, use_reloader=False)
