"""
Application factory for the CRM API.

This module provides a function to create and configure the Flask
application. The database extension is initialised here, the
connection is checked, the named statements are prepared and the
blueprints for clients and contracts are registered, all before the
first request is served.

The database location normally comes from a ``Config`` loaded from
``config.json`` (see ``crm_api.config``). Tests pass a ``test_config``
mapping instead, for example with an in-memory SQLite URI.
"""

from __future__ import annotations

from flask import Flask

from .config import Config
from .db import Gateway, connect, db


def create_app(config: Config | None = None, test_config: dict | None = None) -> Flask:
    """Create and configure a Flask application.

    Parameters
    ----------
    config: Config | None, optional
        Settings loaded from the configuration file.
    test_config: dict | None, optional
        Flask configuration overrides used when running tests.

    Returns
    -------
    Flask
        A configured Flask application instance.

    Raises
    ------
    DatabaseConnectionError
        If the configured database cannot be reached.
    """
    app = Flask(__name__)

    app.config.update(
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        SURFACE_READ_ERRORS=False,
    )
    if config is not None:
        app.config["SQLALCHEMY_DATABASE_URI"] = config.database_uri

    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    connect(app)

    # Statements are prepared once, before any handler can run.
    from .statements import prepare_statements
    gateway = Gateway(db, surface_read_errors=app.config["SURFACE_READ_ERRORS"])
    prepare_statements(gateway)
    app.extensions["gateway"] = gateway

    from .errors import register_error_handlers
    register_error_handlers(app)

    from .routes.clients import clients_bp
    from .routes.contracts import contracts_bp

    app.register_blueprint(clients_bp)
    app.register_blueprint(contracts_bp)

    @app.route("/")
    def index() -> tuple[str, int, dict[str, str]]:
        """Liveness check."""
        return "Server is running!", 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app
