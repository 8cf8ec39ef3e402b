"""
Routes for managing clients.

Clients can be listed, fetched by id, added and soft deleted. There
is no update route. Reads answer with JSON; the mutating routes answer
with a plain-text message and the status code carries the outcome.
"""

from __future__ import annotations

from flask import Blueprint, url_for

from ..db import get_gateway
from ..errors import TEXT_PLAIN, NotFoundError
from ..services import add_client, delete_client, get_client_by_id, list_clients
from ..util.json_body import read_json_body


clients_bp = Blueprint("clients", __name__)


@clients_bp.route("/get/Clients", methods=["GET"])
def get_clients() -> tuple[list[dict], int]:
    """Return all active clients."""
    return list_clients(get_gateway()), 200


@clients_bp.route("/get/Clients/ID/<int:client_id>", methods=["GET"])
def get_client(client_id: int) -> tuple[dict, int]:
    """Return a single active client or 404."""
    client = get_client_by_id(get_gateway(), client_id)
    if client is None:
        raise NotFoundError("Client not found.")
    return client, 200


@clients_bp.route("/post/Client", methods=["POST"])
def post_client():
    """Add a client.

    Requires ``client_name`` and ``phone_number``. The ``Location``
    header of the 201 response points at the new record.
    """
    data = read_json_body()
    client_id = add_client(get_gateway(), data)
    headers = {**TEXT_PLAIN, "Location": url_for("clients.get_client", client_id=client_id)}
    return "Client added.", 201, headers


@clients_bp.route("/delete/Client/<int:client_id>", methods=["DELETE"])
def remove_client(client_id: int):
    """Soft delete a client. Succeeds even if the id is unknown."""
    delete_client(get_gateway(), client_id)
    return "Client deleted.", 200, TEXT_PLAIN
