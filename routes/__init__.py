"""Flask blueprints for the relay's /api endpoints."""

from flask import request


def read_payload() -> dict:
    """JSON body, falling back to form fields; a missing or invalid body reads as empty."""
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    return request.form.to_dict() if request.form else {}
