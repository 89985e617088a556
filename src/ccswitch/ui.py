"""Local web UI: a small Flask app over the profile catalog."""

from __future__ import annotations

import logging
from importlib import resources

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException
from werkzeug.serving import make_server

from ccswitch.config import UI_HOST, UI_PORT, Paths, default_paths
from ccswitch.errors import NotFoundError
from ccswitch.profiles import ProfileStore
from ccswitch.resolver import current_profile
from ccswitch.switch import switch_profile

logger = logging.getLogger(__name__)


def _index_html() -> str:
    return resources.files("ccswitch").joinpath("static/index.html").read_text(encoding="utf-8")


def create_app(paths: Paths | None = None) -> Flask:
    """Build the UI app. Every request re-reads the files on disk."""
    paths = paths or default_paths()
    store = ProfileStore(paths)
    app = Flask(__name__)
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    @app.errorhandler(NotFoundError)
    def not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(Exception)
    def server_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("request failed")
        return jsonify({"error": str(e)}), 500

    @app.route("/")
    def index():
        return Response(_index_html(), mimetype="text/html")

    @app.route("/api/profiles", methods=["GET"])
    def list_profiles():
        return jsonify(store.get_profiles())

    @app.route("/api/profiles", methods=["POST"])
    def save_profiles():
        profiles = request.get_json(silent=True)
        if not isinstance(profiles, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        store.save_profiles(profiles)
        return jsonify({"success": True, "message": "Profiles saved"})

    @app.route("/api/profiles/<path:key>", methods=["DELETE"])
    def delete_profile(key):
        profiles = store.get_profiles()
        if key not in profiles:
            raise NotFoundError(f"Profile '{key}' does not exist")
        del profiles[key]
        store.save_profiles(profiles)
        return jsonify({"success": True, "message": f"Deleted profile: {key}"})

    @app.route("/api/current", methods=["GET"])
    def current():
        result = current_profile(paths)
        return jsonify({"current": result.key or "", "settings": result.settings})

    @app.route("/api/switch/<path:key>", methods=["POST"])
    def switch(key):
        result = switch_profile(key, paths)
        return jsonify({"success": True, "message": f"Switched to profile: {result.key}"})

    return app


def serve(
    paths: Paths | None = None,
    host: str = UI_HOST,
    port: int = UI_PORT,
    on_ready=None,
) -> None:
    """Run the UI until interrupted, then close the listening socket.

    on_ready is called with the URL once the socket is bound.
    """
    app = create_app(paths)
    server = make_server(host, port, app, threaded=False)
    url = f"http://{host}:{server.port}"
    logger.debug("serving UI on %s", url)
    if on_ready:
        on_ready(url)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
        logger.debug("UI server stopped")
