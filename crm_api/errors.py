"""Centralised error handling and custom exceptions.

This module defines the exceptions raised by the record operations and
the Flask error handlers that turn them into responses. The service
layer signals what went wrong; the handlers decide the status code.
Mutating endpoints answer with plain-text messages, so the error
responses are plain text as well.

``ConfigError`` and ``DatabaseConnectionError`` are startup failures.
They are never rendered as HTTP responses; ``run.py`` reports them and
exits.
"""
from __future__ import annotations

import logging

from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


class ConfigError(Exception):
    """Raised when the configuration file is missing or malformed."""


class DatabaseConnectionError(Exception):
    """Raised when the database cannot be reached at startup."""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self):
        return self.message, self.status_code, TEXT_PLAIN


class ValidationError(ServiceError):
    """Raised when a request body is not valid JSON or misses fields."""

    status_code = 400

    def __init__(self, message: str, fields: dict | None = None) -> None:
        super().__init__(message)
        self.fields = fields or {}


class NotFoundError(ServiceError):
    """Raised when a requested record does not exist or was deleted."""

    status_code = 404


class ServerError(ServiceError):
    """Raised when the store fails while handling a request."""

    status_code = 500

    def __init__(self, message: str = "Server error.") -> None:
        super().__init__(message)


def register_error_handlers(app) -> None:
    """Register custom error handlers on the given Flask app."""
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return err.to_response()

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(err: NotFoundError):
        return err.to_response()

    @app.errorhandler(ServerError)
    def handle_server_error(err: ServerError):
        return err.to_response()

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        if isinstance(err, HTTPException):
            return err
        logger.exception("Unhandled error while serving a request")
        return ServerError().to_response()
