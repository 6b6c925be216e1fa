"""
catalog/errors.py

Error taxonomy and handlers.

Every JSON endpoint fails the same way:

    {"error": {"code": "...", "message": "...", "details": {...}}}

Views raise APIError subclasses; register_error_handlers() turns them (and
werkzeug HTTP errors, and anything unexpected) into responses. Pages under
/ui get an HTML error page instead.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from .extensions import db
from .logger import get_logger

logger = get_logger(__name__)


class APIError(Exception):
    """Base error carrying an HTTP status and a machine readable code."""

    status_code = 500
    code = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        body = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return {"error": body}


class ValidationError(APIError):
    status_code = 400
    code = "validation_error"


class NotFoundError(APIError):
    status_code = 404
    code = "not_found"


class ServiceUnavailableError(APIError):
    """A required integration is not configured (e.g. missing API key)."""

    status_code = 503
    code = "service_unavailable"


class UpstreamServiceError(APIError):
    """A third-party API answered with an error or garbage."""

    status_code = 502
    code = "upstream_error"


class UpstreamTimeoutError(UpstreamServiceError):
    status_code = 504
    code = "upstream_timeout"


def _wants_html() -> bool:
    return request.path.startswith("/ui")


def _json_error(status_code: int, code: str, message: str):
    return jsonify({"error": {"code": code, "message": message}}), status_code


def register_error_handlers(app: Flask) -> None:
    """Attach the JSON / HTML error handlers to the application."""

    @app.errorhandler(APIError)
    def _handle_api_error(exc: APIError):
        if exc.status_code >= 500:
            logger.warning(f"{exc.code} on {request.method} {request.path}: {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        if _wants_html():
            return render_template("errors/error.html", error=exc), exc.code
        code = (exc.name or "error").lower().replace(" ", "_")
        return _json_error(exc.code or 500, code, exc.description or exc.name)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        # HTTPException subclasses are routed above; this is a real crash.
        db.session.rollback()
        logger.error(f"Unhandled error on {request.method} {request.path}: {exc}", exc_info=True)
        if _wants_html():
            return render_template("errors/error.html", error=None), 500
        return _json_error(500, "internal_error", "Internal server error.")
