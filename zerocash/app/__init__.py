"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from zerocash import log_config
from zerocash.app.api.routes import api_bp
from zerocash.config import DefaultConfig

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Args:
        overrides: Config values applied on top of ``DefaultConfig``.
    """
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    if overrides:
        app.config.update(overrides)

    log_config.setup(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("zerocash API ready (max horizon %d years)", app.config["MAX_HORIZON_YEARS"])
    return app
