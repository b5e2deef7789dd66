"""
Flask REST API for the album AI proxy.

Endpoints:
    GET  /health
    POST /api/ai            {mode: "ask" | "caption", ...}
    POST /api/ask           legacy alias, mode ask
    POST /api/caption       legacy alias, mode caption
    GET  /api/albums?q=     album search
    GET  /api/albums/<id>   album detail
"""
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .app import AlbumGalleryApp
from .config import GalleryConfig
from .config_loader import load_config_from_env
from .exceptions import (
    AlbumNotFoundError,
    AllProvidersFailedError,
    NoProvidersConfiguredError,
    UpstreamTimeoutError,
)
from .media import thumb_for
from .models import Album
from .security import PayloadTooLargeError, ValidationError

logger = logging.getLogger(__name__)

NO_STORE = {"Cache-Control": "no-store"}


def _album_summary(album: Album) -> dict:
    return {
        "id": album.id,
        "title": album.title,
        "cover": album.cover,
        "description": album.description,
        "tags": list(album.tags),
        "hasVideo": album.has_video,
    }


def _album_detail(album: Album) -> dict:
    detail = _album_summary(album)
    detail["media"] = [
        {"type": item.type.value, "src": item.src, "thumb": thumb_for(item, album.cover)}
        for item in album.media
    ]
    return detail


def _error(message: str, status: int):
    return jsonify({"error": message}), status, NO_STORE


def create_app(config: Optional[GalleryConfig] = None, gallery: Optional[AlbumGalleryApp] = None) -> Flask:
    """
    Create the Flask application.

    :param config: GalleryConfig (loaded from the environment when omitted)
    :param gallery: Initialized facade (built from config when omitted)
    :return: Flask app
    """
    if gallery is None:
        config = config or load_config_from_env()
        gallery = AlbumGalleryApp(config)
        gallery.initialize()
    else:
        config = config or gallery.config

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_body_bytes
    app.config["RATELIMIT_ENABLED"] = config.rate_limit_enabled
    app.extensions["album_gallery"] = gallery

    # Empty allow-list allows every origin; disallowed origins get no CORS headers.
    CORS(
        app,
        origins=config.cors_origins or "*",
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=[config.rate_limit],
        storage_uri="memory://",
    )

    def handle_ai(body: dict, mode: Optional[str]):
        try:
            if mode == "ask":
                response = gallery.ask(body.get("question"), body.get("context"))
                return jsonify(response.to_dict()), 200, NO_STORE
            if mode == "caption":
                response = gallery.caption(body.get("imageUrl"))
                return jsonify(response.to_dict()), 200, NO_STORE
            return _error('Invalid mode. Use "ask" or "caption".', 400)
        except PayloadTooLargeError as e:
            return _error(str(e), 413)
        except ValidationError as e:
            return _error(str(e), 400)
        except NoProvidersConfiguredError as e:
            logger.warning(f"[{mode}] {e}")
            return _error(str(e), 502)
        except UpstreamTimeoutError as e:
            logger.warning(f"[{mode}] {e}")
            return _error("Upstream request timed out", 504)
        except AllProvidersFailedError as e:
            logger.warning(f"[{mode}] {e}")
            return _error("All providers failed. Try again later.", 502)
        except Exception as e:
            logger.error(f"[{mode}] Server error: {e}", exc_info=True)
            return _error("Server error", 500)

    def request_body() -> dict:
        body = request.get_json(silent=True)
        return body if isinstance(body, dict) else {}

    @app.route("/health")
    @limiter.exempt
    def health():
        return jsonify({"ok": True})

    @app.route("/api/ai", methods=["POST"])
    def ai():
        body = request_body()
        return handle_ai(body, body.get("mode"))

    @app.route("/api/ask", methods=["POST"])
    def ask():
        return handle_ai(request_body(), "ask")

    @app.route("/api/caption", methods=["POST"])
    def caption():
        return handle_ai(request_body(), "caption")

    @app.route("/api/albums")
    def albums():
        term = request.args.get("q", "")
        return jsonify({"albums": [_album_summary(a) for a in gallery.search(term)]})

    @app.route("/api/albums/<album_id>")
    def album_detail(album_id):
        try:
            album = gallery.catalog.get(album_id)
        except AlbumNotFoundError as e:
            return jsonify({"error": str(e)}), 404
        return jsonify(_album_detail(album))

    @app.errorhandler(413)
    def too_large(_e):
        return _error("Request body too large", 413)

    @app.errorhandler(429)
    def rate_limited(_e):
        return _error("Too many requests", 429)

    return app
