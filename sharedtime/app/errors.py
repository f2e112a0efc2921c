"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module traduit les exceptions du domaine et de FastAPI en réponses JSON au format
`{code, message, trace_id[, details]}` et enregistre les gestionnaires sur l'application.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from sharedtime.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_CONFLICT,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_METHOD_NOT_ALLOWED,
    HTTP_NOT_FOUND,
    HTTP_UNPROCESSABLE_ENTITY,
)
from sharedtime.domain.errors import FeatureTransitionError, MemberNotFoundError

log = structlog.get_logger(__name__)


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


# Common error codes
class ErrorCodes:
    """Standard error codes for the API."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_HTTP_CODES = {
    HTTP_BAD_REQUEST: ErrorCodes.BAD_REQUEST,
    HTTP_NOT_FOUND: ErrorCodes.NOT_FOUND,
    HTTP_METHOD_NOT_ALLOWED: ErrorCodes.METHOD_NOT_ALLOWED,
    HTTP_CONFLICT: ErrorCodes.CONFLICT,
    HTTP_UNPROCESSABLE_ENTITY: ErrorCodes.VALIDATION_ERROR,
    HTTP_INTERNAL_SERVER_ERROR: ErrorCodes.INTERNAL_ERROR,
}


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    return JSONResponse(
        status_code=status_code,
        content={
            "code": envelope.code,
            "message": envelope.message,
            "trace_id": envelope.trace_id,
            **({"details": envelope.details} if envelope.details else {}),
        },
    )


def extract_trace_id(request: Request) -> str | None:
    """Extract trace ID from request headers (X-Trace-ID, then X-Request-ID)."""
    return request.headers.get("X-Trace-ID") or request.headers.get("X-Request-ID")


def handle_member_not_found(request: Request, exc: MemberNotFoundError) -> JSONResponse:
    """Membre inconnu → 404."""
    return create_error_response(
        HTTP_NOT_FOUND,
        ErrorCodes.NOT_FOUND,
        "Family member not found",
        extract_trace_id(request),
        {"member_id": exc.member_id},
    )


def handle_transition_error(request: Request, exc: FeatureTransitionError) -> JSONResponse:
    """Transition interdite de la machine d'états → 409."""
    log.info("feature_transition_rejected", state=exc.current, action=exc.action)
    return create_error_response(
        HTTP_CONFLICT,
        ErrorCodes.CONFLICT,
        str(exc),
        extract_trace_id(request),
        {"state": exc.current, "action": exc.action},
    )


def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps ou paramètres invalides → 422 avec le détail des erreurs."""
    return create_error_response(
        HTTP_UNPROCESSABLE_ENTITY,
        ErrorCodes.VALIDATION_ERROR,
        "Request validation failed",
        extract_trace_id(request),
        {"errors": jsonable_encoder(exc.errors())},
    )


def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTPException with standard envelope."""
    return create_error_response(
        exc.status_code,
        _HTTP_CODES.get(exc.status_code, "HTTP_ERROR"),
        str(exc.detail),
        extract_trace_id(request),
    )


def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle generic exceptions with standard envelope."""
    trace_id = extract_trace_id(request)
    log.error(
        "unexpected_error",
        trace_id=trace_id,
        exception_type=type(exc).__name__,
        exc_info=exc,
    )
    return create_error_response(
        HTTP_INTERNAL_SERVER_ERROR,
        ErrorCodes.INTERNAL_ERROR,
        "An unexpected error occurred",
        trace_id,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'exceptions sur l'application."""
    app.add_exception_handler(MemberNotFoundError, handle_member_not_found)
    app.add_exception_handler(FeatureTransitionError, handle_transition_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_generic_exception)
