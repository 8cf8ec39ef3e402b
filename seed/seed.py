"""Seed script for demo data.

Running this script inserts a few clients and contracts through the
same record operations the HTTP routes use, so the demo rows follow
the normal insert path. Run it with ``python -m seed.seed`` from the
repository root once ``config.json`` points at a database.
"""
from __future__ import annotations

from flask import Flask

from crm_api import create_app, db
from crm_api.config import config_path_from_env, load_config
from crm_api.services import add_client, add_contract

DEMO_CLIENTS = [
    {"client_name": "Acme", "phone_number": "555-0100"},
    {"client_name": "Globex", "phone_number": "555-0199"},
]


def seed_demo_data(app: Flask) -> list[int]:
    """Insert the demo clients and one contract per client.

    Returns the ids of the inserted clients.
    """
    with app.app_context():
        db.create_all()
        gateway = app.extensions["gateway"]
        client_ids = [add_client(gateway, payload) for payload in DEMO_CLIENTS]
        for client_id in client_ids:
            add_contract(
                gateway,
                {
                    "client_id": client_id,
                    "contract_details": "Annual service agreement",
                    "start_date": "2024-01-01",
                    "end_date": "2024-12-31",
                },
            )
    return client_ids


def run_seeds() -> None:
    app = create_app(load_config(config_path_from_env()))
    client_ids = seed_demo_data(app)
    print(f"Seed data inserted successfully (clients {client_ids}).")


if __name__ == "__main__":
    run_seeds()
