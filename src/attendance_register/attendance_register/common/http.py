from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def domain_error(e: DomainError):
    return json_error(str(e), getattr(e, "status_code", 400))


def server_error(action: str):
    """Log the active exception and answer with the generic 500 body."""
    logger.exception("Error %s", action)
    return json_error("Internal server error", 500)


def read_json() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
