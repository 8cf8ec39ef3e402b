"""Service layer for the CRM API.

This package contains the record operations that sit between the
Flask route handlers and the database gateway. Keeping them out of
the routes keeps the handlers thin and lets the operations be tested
against a gateway directly.

Nothing in this package should perform any HTTP handling. Services
return plain Python data structures and raise exceptions defined in
``crm_api.errors`` when something goes wrong.
"""

from .client_service import add_client, delete_client, get_client_by_id, list_clients
from .contract_service import add_contract, delete_contract, get_contract_by_id, list_contracts

__all__ = [
    "list_clients",
    "get_client_by_id",
    "add_client",
    "delete_client",
    "list_contracts",
    "get_contract_by_id",
    "add_contract",
    "delete_contract",
]
