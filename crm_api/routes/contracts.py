"""
Routes for managing contracts.

Same shape as the client routes: list, fetch by id, add and soft
delete, with no update route.
"""

from __future__ import annotations

from flask import Blueprint, url_for

from ..db import get_gateway
from ..errors import TEXT_PLAIN, NotFoundError
from ..services import add_contract, delete_contract, get_contract_by_id, list_contracts
from ..util.json_body import read_json_body


contracts_bp = Blueprint("contracts", __name__)


@contracts_bp.route("/get/Contracts", methods=["GET"])
def get_contracts() -> tuple[list[dict], int]:
    return list_contracts(get_gateway()), 200


@contracts_bp.route("/get/Contracts/ID/<int:contract_id>", methods=["GET"])
def get_contract(contract_id: int) -> tuple[dict, int]:
    contract = get_contract_by_id(get_gateway(), contract_id)
    if contract is None:
        raise NotFoundError("Contract not found.")
    return contract, 200


@contracts_bp.route("/post/Contract", methods=["POST"])
def post_contract():
    """Add a contract.

    Requires ``client_id``, ``contract_details``, ``start_date`` and
    ``end_date``; ``contract_amount`` is left to the database default.
    """
    data = read_json_body()
    contract_id = add_contract(get_gateway(), data)
    headers = {**TEXT_PLAIN, "Location": url_for("contracts.get_contract", contract_id=contract_id)}
    return "Contract added.", 201, headers


@contracts_bp.route("/delete/Contract/<int:contract_id>", methods=["DELETE"])
def remove_contract(contract_id: int):
    delete_contract(get_gateway(), contract_id)
    return "Contract deleted.", 200, TEXT_PLAIN
