"""
Static asset server with single-page-application fallback.

Routes:
    /                 index document
    /<existing file>  the file, with JS and CSS content types forced (dotfiles hidden)
    /api...           404 JSON error
    /<path with dot>  404 plain text
    anything else     index document, so client-side routing can take over

Only GET is routed; other methods get a plain-text 404.
"""

import os
from typing import Optional

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.security import safe_join

from .models import ServerConfig


MIME_TYPES = {
    ".js": "application/javascript",
    ".css": "text/css",
}


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """Build the Flask application serving config.dist_dir."""
    config = config or ServerConfig()
    dist_dir = str(config.dist_dir.resolve())

    app = Flask(__name__, static_folder=None)

    def send_asset(path: str):
        _, ext = os.path.splitext(path)
        return send_from_directory(dist_dir, path, mimetype=MIME_TYPES.get(ext.lower()))

    def send_index():
        return send_from_directory(dist_dir, config.index_file)

    @app.get("/")
    def index():
        return send_index()

    @app.get("/<path:path>")
    def catch_all(path: str):
        full_path = safe_join(dist_dir, path)
        hidden = any(part.startswith(".") for part in path.split("/"))
        if full_path is not None and not hidden and os.path.isfile(full_path):
            return send_asset(path)

        if request.path.startswith(config.api_prefix):
            return jsonify({"error": "API endpoint not found"}), 404

        if "." in request.path:
            return "File not found", 404, {"Content-Type": "text/plain; charset=utf-8"}

        return send_index()

    @app.errorhandler(405)
    def unmatched_method(error):
        return f"Cannot {request.method} {request.path}", 404, {"Content-Type": "text/plain; charset=utf-8"}

    return app


def run(config: Optional[ServerConfig] = None) -> None:
    """Create the app and serve it until interrupted."""
    config = config or ServerConfig()
    app = create_app(config)
    print(f"Server running on http://localhost:{config.port}")
    app.run(host=config.host, port=config.port)
