"""Flask application factory.

Kept separate from `abjad_api/__init__.py` so importing the engine modules
(`abjad_api.abjad`, `abjad_api.compatibility`, ...) from scripts doesn't
require Flask.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, jsonify

from .abjad import get_table
from .config import Config
from .errors import AbjadError
from .extensions import api
from .routes import blp

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(app: Flask) -> None:
    level = getattr(logging, app.config["LOG_LEVEL"], logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    app.logger.setLevel(level)
    engine_level = logging.DEBUG if app.config.get("ENGINE_DEBUG_LOG") else level
    logging.getLogger("abjad_api").setLevel(engine_level)


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # Fail at startup rather than on the first request.
    get_table(app.config["ABJAD_DEFAULT_SYSTEM"])

    app.json.ensure_ascii = False
    configure_logging(app)
    api.init_app(app)
    api.register_blueprint(blp)

    @app.get("/")
    def index():
        return {
            "service": "Abjad API",
            "swagger_ui": "/swagger-ui",
            "openapi_json": "/openapi.json",
            "endpoints": [
                "/abjad",
                "/normalize",
                "/transliterate",
                "/name-destiny",
                "/compatibility",
                "/istikhara",
                "/elements",
                "/elements/{index}",
                "/buruj/{index}",
            ],
        }

    @app.errorhandler(AbjadError)
    def engine_error(e: AbjadError):
        # InvalidInput is turned into a 422 by the routes; anything reaching
        # here is a bug in the engine.
        logger.exception("engine error")
        return jsonify(code=500, status="Internal Server Error", message=str(e)), 500

    @app.get("/health")
    def health():
        """Liveness only: the engine has no external dependencies to probe."""
        return {"ok": True, "default_system": app.config["ABJAD_DEFAULT_SYSTEM"]}

    logger.info("Abjad API ready (default system: %s)", app.config["ABJAD_DEFAULT_SYSTEM"])
    return app
