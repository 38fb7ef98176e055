"""
Flask blueprints for the WiFi scanner API.

Run a development server with:
    flask --app routes:create_app run
"""

from __future__ import annotations

from flask import Flask

from wifiscanner.config import configure_logging


def register_blueprints(app: Flask) -> None:
    """Register all route blueprints on an application."""
    from .wifi import wifi_bp

    app.register_blueprint(wifi_bp)


def create_app() -> Flask:
    """Application factory."""
    configure_logging()
    app = Flask(__name__)
    register_blueprints(app)
    return app
