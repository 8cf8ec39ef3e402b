"""Database setup utilities.

This module centralises the database plumbing. It exposes the ``db``
object used by the models and the ``Gateway`` through which every
record operation talks to the store.

The gateway keeps a registry of named, parameterised statements that
are prepared once while the application is created. Statements run in
Flask-SQLAlchemy's request-scoped session, so each request checks a
connection out of the engine's pool and returns it when the app context
is torn down. Nothing holds a connection between requests.
"""
from __future__ import annotations

import logging
from typing import Any

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable

from .errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


class Gateway:
    """Named statement registry bound to a Flask-SQLAlchemy instance."""

    def __init__(self, database: SQLAlchemy, surface_read_errors: bool = False) -> None:
        self._db = database
        self._statements: dict[str, Executable] = {}
        # When False, read failures look like empty results to callers.
        self.surface_read_errors = surface_read_errors

    def prepare(self, name: str, statement: Executable) -> None:
        """Register ``statement`` under ``name``.

        Statements are registered once at startup; registering the same
        name twice is a programming error.
        """
        if name in self:
            raise ValueError(f"Statement {name!r} is already prepared.")
        self._statements[name] = statement

    def __contains__(self, name: str) -> bool:
        return name in self._statements

    def execute_prepared(self, name: str, /, **params: Any) -> Result:
        """Execute the statement registered as ``name`` with ``params``.

        ``name`` is positional-only so bind parameters may use any name,
        ``name`` included.
        """
        if name not in self:
            raise KeyError(f"Statement {name!r} is not prepared.")
        statement = self._statements[name]
        return self._db.session.execute(statement, params)

    def execute(self, statement: Executable, /, **params: Any) -> Result:
        """Execute an ad-hoc statement in the current session."""
        return self._db.session.execute(statement, params)

    def commit(self) -> None:
        self._db.session.commit()

    def rollback(self) -> None:
        self._db.session.rollback()


def connect(app: Flask) -> None:
    """Open a connection to verify that the configured database is reachable.

    Raises
    ------
    DatabaseConnectionError
        If the engine cannot open a connection.
    """
    with app.app_context():
        try:
            with db.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("Could not connect to the database: %s", exc)
            raise DatabaseConnectionError(
                "Could not open a connection to the database."
            ) from exc


def get_gateway() -> Gateway:
    """Return the gateway of the application handling the current request."""
    return current_app.extensions["gateway"]
