"""Tests for the startup script and the seed script."""
from __future__ import annotations

import json

import run
from crm_api.services import list_clients, list_contracts
from seed.seed import seed_demo_data


def test_missing_config_exits_with_1(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("CRM_CONFIG", str(tmp_path / "config.json"))
    assert run.main() == 1


def test_unreachable_database_exits_with_1(tmp_path, monkeypatch) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {"db": {"host": "127.0.0.1", "port": 1, "dbname": "crm", "user": "crm", "password": "x"}}
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("CRM_CONFIG", str(path))
    assert run.main() == 1


def test_seed_inserts_demo_rows(app) -> None:
    client_ids = seed_demo_data(app)
    assert len(client_ids) == 2
    with app.app_context():
        gateway = app.extensions["gateway"]
        assert [c["client_id"] for c in list_clients(gateway)] == client_ids
        assert sorted(c["client_id"] for c in list_contracts(gateway)) == sorted(client_ids)
