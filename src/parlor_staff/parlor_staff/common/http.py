from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    ImmutableRecordError,
    NotFoundError,
    ValidationError,
)
from ..users.service import ensure_can_access_user

logger = logging.getLogger(__name__)

_STATUS = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ImmutableRecordError, 409),
)


def error_body(message: str, errors: Optional[Mapping[str, str]] = None) -> dict:
    return {"success": False, "message": message, "errors": dict(errors or {})}


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role"))


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Please log in to continue")
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Please log in to continue")
        if session.get("role") != Role.ADMIN.value:
            raise AuthorizationError("Admin only")
        return view(*args, **kwargs)

    return wrapper


def owner_or_admin(view):
    """Guard for /users/<user_id>/... routes."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Please log in to continue")
        ensure_can_access_user(
            current_user_id=current_user_id(),
            current_role=current_role(),
            target_user_id=int(kwargs["user_id"]),
        )
        return view(*args, **kwargs)

    return wrapper


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in _STATUS if isinstance(e, cls)), 400)
        errors: Any = getattr(e, "errors", None)
        return jsonify(error_body(str(e), errors)), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify(error_body(e.description or e.name)), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = f"Internal error: {e}" if app.config.get("DEBUG") else "Internal error"
        return jsonify(error_body(message)), 500
