"""
Todo Service Flask Application Factory.

Provides the ``create_app`` factory function that assembles the todo
service.  The factory pattern allows several application instances with
different configurations (development, testing, production) to coexist in
the same process -- each test gets its own app and its own database.

The factory wires the layers together explicitly:
  * a ``TaskStore`` wrapping the SQLAlchemy session,
  * a ``TaskService`` that receives the store,
  * the ``todo_bp`` blueprint that exposes the service over HTTP.

Key Concepts Demonstrated:
- Application factory pattern (``create_app``)
- Dependency injection of the storage gateway into the service
- SQLAlchemy integration with Flask via ``flask_sqlalchemy``
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from flask import Flask, Response
from flask_sqlalchemy import SQLAlchemy

from config import get_config


db = SQLAlchemy()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_EXTENSION_KEY = "todo_service"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix) :].split("?", 1)[0]
    if not sqlite_path or sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def _apply_cors_headers(response: Response) -> Response:
    """Attach permissive cross-origin headers to an outgoing response."""
    for header, value in CORS_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


def create_app(
    config_name: str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Flask:
    """
    Create and configure the todo service application.

    Loads the configuration class, applies any explicit overrides,
    initialises SQLAlchemy, creates the ``tasks`` table when missing, builds
    the store and service, and registers the HTTP blueprint.

    Args:
        config_name: Optional configuration environment name
            (``"development"``, ``"testing"``, ``"production"``).  When
            *None*, the value is read from the ``FLASK_ENV`` environment
            variable, defaulting to ``"development"``.
        overrides: Optional mapping of configuration keys applied on top of
            the configuration class (for example a per-test database URI).

    Returns:
        A fully configured Flask application instance ready to serve requests.
    """
    app = Flask(__name__, instance_relative_config=True)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    logger.info("Creating todo service app with config: %s", config_class.__name__)

    os.makedirs(app.instance_path, exist_ok=True)
    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))

    # Responses keep the declared field order: id, title, completed, and are
    # compact in every profile, debug included.
    app.json.sort_keys = False
    app.json.compact = True

    db.init_app(app)

    from .routes.api import todo_bp
    from .service import TaskService
    from .store import TaskStore

    app.extensions[SERVICE_EXTENSION_KEY] = TaskService(TaskStore(db.session))
    app.register_blueprint(todo_bp)

    if app.config.get("CORS_ALLOW_ALL"):
        app.after_request(_apply_cors_headers)

    with app.app_context():
        db.create_all()
        logger.info("Todo service database tables created")

    return app
