"""Shared Flask helpers: auth decorators and JSON error responses."""

from __future__ import annotations

import logging
from datetime import date
from functools import wraps

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, StorageError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def json_error(message: str, status: int, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please log in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return json_error("You do not have permission", 403)
        return view(*args, **kwargs)

    return wrapper


def request_data():
    """JSON object body, or form fields when the request carries no JSON."""

    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role", Role.USER.value))


def parse_date_arg(value: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e):
        return json_error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e):
        return json_error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e):
        return json_error(str(e), 403)

    @app.errorhandler(StorageError)
    def _storage(e):
        return json_error("Could not reach the database, please try again", 503)

    @app.errorhandler(Exception)
    def _unexpected(e):
        # Let Flask render its own HTTP errors (404, 405, ...).
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return json_error(f"System error: {e}", 500)
        return json_error("System error", 500)
