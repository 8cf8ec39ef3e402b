"""Statements used by the record operations.

The six named statements are prepared on the gateway when the
application is created. The list queries are plain module-level
selects because they take no parameters.

Bind parameter names differ from the column names: SQLAlchemy reserves
column names for the automatic VALUES/SET parameters of insert() and
update().
"""
from __future__ import annotations

from sqlalchemy import bindparam, false, insert, select, true, update

from .db import Gateway
from .models import Client, Contract

clients = Client.__table__
contracts = Contract.__table__

INSERT_CLIENT = "insert_client"
SELECT_CLIENT_BY_ID = "select_client_by_id"
DELETE_CLIENT = "delete_client"

INSERT_CONTRACT = "insert_contract"
SELECT_CONTRACT_BY_ID = "select_contract_by_id"
DELETE_CONTRACT = "delete_contract"

SELECT_ACTIVE_CLIENTS = (
    select(clients).where(clients.c.is_deleted == false()).order_by(clients.c.client_id)
)
SELECT_ACTIVE_CONTRACTS = (
    select(contracts).where(contracts.c.is_deleted == false()).order_by(contracts.c.contract_id)
)


def prepare_statements(gateway: Gateway) -> None:
    """Register the insert, select-by-id and soft-delete statements."""
    gateway.prepare(
        INSERT_CLIENT,
        insert(clients).values(
            client_name=bindparam("name", type_=clients.c.client_name.type),
            phone_number=bindparam("phone", type_=clients.c.phone_number.type),
        ),
    )
    gateway.prepare(
        SELECT_CLIENT_BY_ID,
        select(clients).where(clients.c.client_id == bindparam("id")),
    )
    gateway.prepare(
        DELETE_CLIENT,
        update(clients).where(clients.c.client_id == bindparam("id")).values(is_deleted=true()),
    )

    gateway.prepare(
        INSERT_CONTRACT,
        insert(contracts).values(
            client_id=bindparam("client", type_=contracts.c.client_id.type),
            contract_details=bindparam("details", type_=contracts.c.contract_details.type),
            start_date=bindparam("start", type_=contracts.c.start_date.type),
            end_date=bindparam("end", type_=contracts.c.end_date.type),
        ),
    )
    gateway.prepare(
        SELECT_CONTRACT_BY_ID,
        select(contracts).where(contracts.c.contract_id == bindparam("id")),
    )
    gateway.prepare(
        DELETE_CONTRACT,
        update(contracts).where(contracts.c.contract_id == bindparam("id")).values(is_deleted=true()),
    )
