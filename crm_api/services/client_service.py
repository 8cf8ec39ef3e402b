"""Client record operations."""
from __future__ import annotations

from typing import Any, Optional

from marshmallow import ValidationError as SchemaValidationError

from ..db import Gateway
from ..errors import ValidationError
from ..schemas import NewClientSchema, client_schema
from ..statements import (
    DELETE_CLIENT,
    INSERT_CLIENT,
    SELECT_ACTIVE_CLIENTS,
    SELECT_CLIENT_BY_ID,
)
from .soft_delete_service import fetch_active, insert_record, list_active, soft_delete


def list_clients(gateway: Gateway) -> list[dict]:
    """Return all clients that have not been deleted, oldest first."""
    return list_active(gateway, SELECT_ACTIVE_CLIENTS, client_schema, "clients")


def get_client_by_id(gateway: Gateway, client_id: int) -> Optional[dict]:
    """Return the client with ``client_id``, or ``None`` if absent or deleted."""
    return fetch_active(gateway, SELECT_CLIENT_BY_ID, client_id, client_schema, "client")


def add_client(gateway: Gateway, payload: Any) -> int:
    """Insert a client from a request payload and return its new id.

    ``client_name`` and ``phone_number`` must both be present and not
    null, otherwise ``ValidationError`` is raised and nothing is inserted.
    """
    try:
        params = NewClientSchema().load(payload)
    except SchemaValidationError as err:
        raise ValidationError("Invalid client data.", fields=err.messages) from err
    return insert_record(gateway, INSERT_CLIENT, params, "client")


def delete_client(gateway: Gateway, client_id: int) -> None:
    """Soft delete the client with ``client_id``."""
    soft_delete(gateway, DELETE_CLIENT, client_id, "client")
