from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from ..common.datetime_utils import utc_timestamp
from ..core.exceptions import (
    DatabaseUnavailableError,
    DomainError,
    NotFoundError,
    OriginNotAllowedError,
    PersistenceError,
    ValidationError,
)
from .routing import available_endpoints

logger = logging.getLogger("attendance_tracker.errors")

STATUS_BY_ERROR: dict[type, int] = {
    ValidationError: 400,
    OriginNotAllowedError: 403,
    NotFoundError: 404,
    PersistenceError: 500,
    DatabaseUnavailableError: 503,
}


def status_for(exc: DomainError) -> int:
    """Most specific mapping along the exception's class hierarchy."""

    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


def error_body(exc: DomainError) -> dict:
    if isinstance(exc, DatabaseUnavailableError):
        return {
            "error": "Database connection failed",
            "message": "Unable to connect to database",
        }
    if isinstance(exc, OriginNotAllowedError):
        return {"error": "CORS Error", "message": exc.message, "origin": exc.origin}
    return {"error": exc.message}


def register(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = status_for(exc)
        if status >= 500:
            logger.error(
                "request_failed",
                extra={"path": request.path, "method": request.method, "error": exc.message},
                exc_info=exc.__cause__ or exc,
            )
        body = error_body(exc)
        body["timestamp"] = utc_timestamp()
        return jsonify(body), status

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_route_not_found(exc: HTTPException):
        logger.info("route_not_found", extra={"path": request.path, "method": request.method})
        return (
            jsonify(
                {
                    "error": "Route not found",
                    "path": request.full_path.rstrip("?"),
                    "method": request.method,
                    "message": "The requested endpoint does not exist",
                    "timestamp": utc_timestamp(),
                    "availableEndpoints": available_endpoints(app),
                }
            ),
            404,
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        return jsonify({"error": exc.description or exc.name, "timestamp": utc_timestamp()}), exc.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        logger.exception("unhandled_error", extra={"path": request.path, "method": request.method})
        return jsonify({"error": "Internal server error", "timestamp": utc_timestamp()}), 500
