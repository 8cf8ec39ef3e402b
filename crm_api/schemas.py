"""
Serialization schemas using Marshmallow for the CRM API.

Two kinds of schema live here. The ``SQLAlchemyAutoSchema`` subclasses
turn a database row into its JSON representation; the soft-delete flag
is never exposed. The ``New*Schema`` classes read a request payload and
produce the bind parameters of the matching insert statement, so the
JSON keys (``client_name``) are loaded under the statement's parameter
names (``name``).
"""

from __future__ import annotations

from dateutil.parser import isoparse  # type: ignore
from marshmallow import EXCLUDE, Schema, fields
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from .models import Client, Contract


class ClientSchema(SQLAlchemyAutoSchema):
    """Schema for serialising rows of the ``clients`` table."""

    class Meta:
        model = Client
        include_fk = True
        exclude = ("is_deleted",)


class ContractSchema(SQLAlchemyAutoSchema):
    """Schema for serialising rows of the ``contracts`` table."""

    contract_amount = fields.Float(allow_none=True)

    class Meta:
        model = Contract
        include_fk = True
        exclude = ("is_deleted",)


class NewClientSchema(Schema):
    """Payload of ``POST /post/Client``."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, data_key="client_name")
    phone = fields.String(required=True, data_key="phone_number")


class NewContractSchema(Schema):
    """Payload of ``POST /post/Contract``.

    Dates are kept as text here; ``to_date_params`` converts them right
    before the insert. A value that is not a date is not a validation
    failure: it fails the way the database would reject it, as a store
    error.
    """

    class Meta:
        unknown = EXCLUDE

    client = fields.Integer(required=True, strict=True, data_key="client_id")
    details = fields.String(required=True, data_key="contract_details")
    start = fields.String(required=True, data_key="start_date")
    end = fields.String(required=True, data_key="end_date")


client_schema = ClientSchema()
clients_schema = ClientSchema(many=True)
contract_schema = ContractSchema()
contracts_schema = ContractSchema(many=True)


def to_date_params(params: dict) -> dict:
    """Convert the ``start``/``end`` texts of contract params to dates.

    Only ISO 8601 texts are accepted. Partial texts such as ``"5"`` or
    ``"March"`` raise ``ValueError`` instead of being completed from
    the current date.
    """
    return {
        **params,
        "start": isoparse(params["start"]).date(),
        "end": isoparse(params["end"]).date(),
    }
