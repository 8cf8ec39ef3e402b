"""Contract record operations.

These mirror the client operations. ``contract_amount`` is not part of
the insert; the database assigns its default.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from marshmallow import ValidationError as SchemaValidationError

from ..db import Gateway
from ..errors import ServerError, ValidationError
from ..schemas import NewContractSchema, contract_schema, to_date_params
from ..statements import (
    DELETE_CONTRACT,
    INSERT_CONTRACT,
    SELECT_ACTIVE_CONTRACTS,
    SELECT_CONTRACT_BY_ID,
)
from .soft_delete_service import fetch_active, insert_record, list_active, soft_delete

logger = logging.getLogger(__name__)


def list_contracts(gateway: Gateway) -> list[dict]:
    """Return all contracts that have not been deleted, oldest first."""
    return list_active(gateway, SELECT_ACTIVE_CONTRACTS, contract_schema, "contracts")


def get_contract_by_id(gateway: Gateway, contract_id: int) -> Optional[dict]:
    """Return the contract with ``contract_id``, or ``None`` if absent or deleted."""
    return fetch_active(gateway, SELECT_CONTRACT_BY_ID, contract_id, contract_schema, "contract")


def add_contract(gateway: Gateway, payload: Any) -> int:
    """Insert a contract from a request payload and return its new id.

    Requires ``client_id``, ``contract_details``, ``start_date`` and
    ``end_date``. The client is not checked for existence.
    """
    try:
        params = NewContractSchema().load(payload)
    except SchemaValidationError as err:
        raise ValidationError("Invalid contract data.", fields=err.messages) from err
    try:
        params = to_date_params(params)
    except (ValueError, OverflowError):
        logger.exception("Failed to add contract: unusable dates")
        raise ServerError()
    return insert_record(gateway, INSERT_CONTRACT, params, "contract")


def delete_contract(gateway: Gateway, contract_id: int) -> None:
    """Soft delete the contract with ``contract_id``."""
    soft_delete(gateway, DELETE_CONTRACT, contract_id, "contract")
