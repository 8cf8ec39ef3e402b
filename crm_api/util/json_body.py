"""Request body helpers."""
from __future__ import annotations

from typing import Any

from flask import request

from ..errors import ValidationError

INVALID_JSON = "Invalid JSON."


def read_json_body() -> Any:
    """Parse the body of the current request as JSON.

    The Content-Type header is ignored. An empty or unparsable body, or
    a body of ``null``, raises ``ValidationError``.
    """
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        raise ValidationError(INVALID_JSON)
    return payload
