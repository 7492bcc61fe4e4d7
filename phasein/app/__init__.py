"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from phasein.app.api.routes import api_bp
from phasein.config import AppConfig


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config["SIMULATION"] = config or AppConfig.from_env()

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["SIMULATION"].cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
