import logging
import os

from flask import Flask, send_from_directory
from flask_swagger_ui import get_swaggerui_blueprint

from .config import config_by_name
from .extensions import db, migrate, jwt
from .api import api_bp
from .errors import register_error_handlers
from .cli import register_commands
from .store.sql import SQLContentStore

OPENAPI_FILE = "portal_openapi.yaml"
OPENAPI_URL = "/openapi/portal.yaml"
SWAGGER_URL = "/swagger"


def create_app(config_name: str = "development", store=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # app.logger is the "portal" logger; module loggers under portal.* inherit its level
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Content store
    # -------------------------------------------------
    if store is None:
        store = SQLContentStore(db)
    app.extensions["content_store"] = store

    # -------------------------------------------------
    # Routes, errors, commands
    # -------------------------------------------------
    app.register_blueprint(api_bp)
    register_error_handlers(app)
    register_commands(app)
    _register_docs(app)

    logging.getLogger(__name__).debug(
        "portal app created (config=%s, store=%s)", config_name, type(store).__name__
    )
    return app


def _register_docs(app):
    """Serve the OpenAPI description and a Swagger UI pointed at it."""
    api_dir = os.path.join(app.root_path, "api")

    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_portal")
    def serve_openapi():
        return send_from_directory(api_dir, OPENAPI_FILE, mimetype="application/yaml")

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        OPENAPI_URL,
        config={
            "app_name": "Institute Portal API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )
    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)
