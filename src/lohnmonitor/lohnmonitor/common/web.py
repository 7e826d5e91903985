from __future__ import annotations

import logging
from functools import wraps
from typing import Iterable

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    ScanInProgressError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ScanInProgressError, 409),
    (ValidationError, 400),
    (ConfigurationError, 500),
)


def current_role() -> Role:
    return Role(session["role"])


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Nicht angemeldet"}), 401
        return view(*args, **kwargs)

    return wrapper


def roles_required(roles: Iterable[Role]):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Nicht angemeldet"}), 401
            if session.get("role") not in allowed:
                return jsonify({"error": "Keine Berechtigung für diese Aktion"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def error_response(e: DomainError):
    for exc_type, status in _STATUS_BY_ERROR:
        if isinstance(e, exc_type):
            if status >= 500:
                logger.error("Configuration problem: %s", e)
            return jsonify({"error": str(e)}), status
    logger.error("Unhandled domain error: %s", e)
    return jsonify({"error": str(e)}), 500
