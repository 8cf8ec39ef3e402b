"""Soft delete utilities.

To preserve historical data without permanently removing records,
the application uses *soft deletion*. Instead of deleting rows from
the database, the ``is_deleted`` flag is set. Every read path must
skip flagged rows.

The helpers here implement the four record operations once; the client
and contract services call them with their own statements and schemas.
Each helper runs a single statement in its own transaction.

Read failures are logged and reported as "no records" unless the
gateway was created with ``surface_read_errors``; write failures are
rolled back, logged and raised as ``ServerError``.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from marshmallow import Schema
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable

from ..db import Gateway
from ..errors import ServerError

logger = logging.getLogger(__name__)


def list_active(gateway: Gateway, statement: Executable, schema: Schema, label: str) -> list[dict]:
    """Return every row selected by ``statement`` serialised with ``schema``.

    ``statement`` must already filter out soft-deleted rows.
    """
    try:
        rows = gateway.execute(statement).mappings().all()
        gateway.commit()
    except SQLAlchemyError:
        gateway.rollback()
        logger.exception("Failed to list %s", label)
        if gateway.surface_read_errors:
            raise ServerError()
        return []
    return schema.dump(rows, many=True)


def fetch_active(
    gateway: Gateway, statement_name: str, record_id: int, schema: Schema, label: str
) -> Optional[dict]:
    """Return the serialised row with ``record_id`` or ``None``.

    ``None`` is returned both when no row matches and when the row is
    soft-deleted.
    """
    try:
        row = gateway.execute_prepared(statement_name, id=record_id).mappings().first()
        gateway.commit()
    except SQLAlchemyError:
        gateway.rollback()
        logger.exception("Failed to fetch %s %s", label, record_id)
        if gateway.surface_read_errors:
            raise ServerError()
        return None
    if row is None or row["is_deleted"]:
        return None
    return schema.dump(row)


def insert_record(gateway: Gateway, statement_name: str, params: dict[str, Any], label: str) -> int:
    """Insert a row and return the primary key assigned by the store."""
    try:
        result = gateway.execute_prepared(statement_name, **params)
        gateway.commit()
    except SQLAlchemyError:
        gateway.rollback()
        logger.exception("Failed to add %s", label)
        raise ServerError()
    record_id = result.inserted_primary_key[0]
    logger.info("Added %s %s", label, record_id)
    return record_id


def soft_delete(gateway: Gateway, statement_name: str, record_id: int, label: str) -> None:
    """Flag the row with ``record_id`` as deleted.

    No existence check is made: deleting an unknown or already deleted
    id succeeds without changing anything.
    """
    try:
        gateway.execute_prepared(statement_name, id=record_id)
        gateway.commit()
    except SQLAlchemyError:
        gateway.rollback()
        logger.exception("Failed to delete %s %s", label, record_id)
        raise ServerError()
    logger.info("Soft deleted %s %s", label, record_id)
