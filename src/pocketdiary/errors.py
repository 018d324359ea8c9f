"""Domain error taxonomy and its HTTP rendering."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .logging_config import get_logger

logger = get_logger(__name__)


class DiaryError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = 500
    code = "internal_error"
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class Unauthenticated(DiaryError):
    status_code = 401
    code = "unauthenticated"
    default_message = "Sign in to continue."


class Forbidden(DiaryError):
    status_code = 403
    code = "forbidden"
    default_message = "Entry can no longer be edited."


class NotFound(DiaryError):
    status_code = 404
    code = "not_found"
    default_message = "Entry not found."


class Conflict(DiaryError):
    status_code = 409
    code = "conflict"
    default_message = "An entry already exists for this date."


class ValidationFailed(DiaryError):
    status_code = 400
    code = "invalid_request"
    default_message = "The request payload is invalid."


class Internal(DiaryError):
    """Storage or unexpected failure; safe to retry after a delay."""


def register_error_handlers(app: Flask) -> None:
    """Render domain and unexpected errors as JSON bodies."""

    @app.errorhandler(DiaryError)
    def _handle_diary_error(exc: DiaryError):
        if exc.status_code >= 500:
            logger.error("Request failed: %s", exc.message, exc_info=exc)
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        return (
            jsonify({"error": (exc.name or "error").lower().replace(" ", "_"), "message": exc.description}),
            exc.code or 500,
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled error while serving request")
        return jsonify(Internal().to_dict()), Internal.status_code


__all__ = [
    "Conflict",
    "DiaryError",
    "Forbidden",
    "Internal",
    "NotFound",
    "Unauthenticated",
    "ValidationFailed",
    "register_error_handlers",
]
