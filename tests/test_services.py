"""Tests for the record operations called directly against the gateway."""
from __future__ import annotations

import pytest

from crm_api.errors import ValidationError
from crm_api.services import (
    add_client,
    add_contract,
    delete_client,
    delete_contract,
    get_client_by_id,
    get_contract_by_id,
    list_clients,
    list_contracts,
)


def test_add_client_returns_new_id(gateway) -> None:
    client_id = add_client(gateway, {"client_name": "Acme", "phone_number": "555-0100"})
    assert get_client_by_id(gateway, client_id) == {
        "client_id": client_id,
        "client_name": "Acme",
        "phone_number": "555-0100",
    }


def test_add_client_reports_missing_fields(gateway) -> None:
    with pytest.raises(ValidationError) as excinfo:
        add_client(gateway, {})
    assert set(excinfo.value.fields) == {"client_name", "phone_number"}
    assert list_clients(gateway) == []


def test_deleted_client_is_hidden(gateway) -> None:
    client_id = add_client(gateway, {"client_name": "Acme", "phone_number": "1"})
    delete_client(gateway, client_id)
    assert get_client_by_id(gateway, client_id) is None
    assert list_clients(gateway) == []


def test_contract_round_through_services(gateway) -> None:
    contract_id = add_contract(
        gateway,
        {
            "client_id": 3,
            "contract_details": "Support",
            "start_date": "2024-02-01",
            "end_date": "2025-01-31",
        },
    )
    contract = get_contract_by_id(gateway, contract_id)
    assert contract["start_date"] == "2024-02-01"
    assert contract["end_date"] == "2025-01-31"
    assert [c["contract_id"] for c in list_contracts(gateway)] == [contract_id]

    delete_contract(gateway, contract_id)
    assert get_contract_by_id(gateway, contract_id) is None
    assert list_contracts(gateway) == []


def test_contract_client_id_must_be_integer(gateway) -> None:
    with pytest.raises(ValidationError):
        add_contract(
            gateway,
            {
                "client_id": "one",
                "contract_details": "Support",
                "start_date": "2024-02-01",
                "end_date": "2025-01-31",
            },
        )
