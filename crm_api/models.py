"""
Database models for the CRM API.

Two tables are mapped: ``clients`` and ``contracts``. Both use a
boolean ``is_deleted`` flag for soft deletion; rows are never removed
by the service. Contracts reference clients through ``client_id``, but
the service itself never checks that the referenced client exists, it
leaves referential integrity to the database.

The models describe the schema so that a development or test database
can be created with ``db.create_all()``. The record operations work on
the underlying tables (``Client.__table__``) through the statements in
``statements.py``.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import false

from .db import db


class Client(db.Model):
    __allow_unmapped__ = True
    """A client of the business."""
    __tablename__ = "clients"

    client_id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    client_name: str = db.Column(db.Text, nullable=False)
    phone_number: str = db.Column(db.Text, nullable=False)
    is_deleted: bool = db.Column(db.Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<Client {self.client_id} {self.client_name}>"


class Contract(db.Model):
    __allow_unmapped__ = True
    """A contract signed with a client.

    ``contract_amount`` is never supplied on insert; the database default
    applies.
    """
    __tablename__ = "contracts"

    contract_id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    client_id: int = db.Column(db.Integer, db.ForeignKey("clients.client_id"), nullable=False)
    contract_details: str = db.Column(db.Text, nullable=False)
    start_date: date = db.Column(db.Date, nullable=False)
    end_date: date = db.Column(db.Date, nullable=False)
    contract_amount: Decimal = db.Column(db.Numeric(12, 2), nullable=False, server_default="0")
    is_deleted: bool = db.Column(db.Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<Contract {self.contract_id} client={self.client_id}>"
