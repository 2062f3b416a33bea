from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from django.http import Http404
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = "Something went wrong"

# DRF exception type -> (error code, message used when DRF gives no detail string)
API_ERROR_CODES = (
    (ValidationError, "VALIDATION_ERROR", "Validation failed"),
    (ParseError, "VALIDATION_ERROR", "Malformed request"),
    (NotFound, "NOT_FOUND", "Resource not found"),
    (MethodNotAllowed, "METHOD_NOT_ALLOWED", "Method not allowed"),
    (UnsupportedMediaType, "UNSUPPORTED_MEDIA_TYPE", "Unsupported media type"),
)


class ApplicationError(Exception):
    """
    Error raised by services and rendered as the standard error envelope.

    Subclasses set ``default_code``; the HTTP status follows from the code
    unless ``status_code`` is given.
    """

    default_code = "SERVER_ERROR"

    def __init__(
        self,
        code: Optional[str],
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_response(self) -> Response:
        return error_response(
            self.code, self.message, self.details, http_status=self.status_code
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER``: every failure leaves the API as an error envelope."""

    log = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        log.info(
            "Handled application error",
            code=exc.code,
            error_type=exc.__class__.__name__,
            detail=exc.message,
        )
        return exc.to_response()

    if isinstance(exc, Http404):
        exc = NotFound()

    # DRF's handler also rolls back an open atomic block.
    response = drf_exception_handler(exc, context)
    if response is None:
        log.exception("Unhandled exception bubbled to global handler")
        return error_response("SERVER_ERROR", SERVER_ERROR_MESSAGE)

    code, message, details = _describe(exc, response.data)
    log.info("Converted API exception", code=code, status=response.status_code)
    return error_response(code, message, details, http_status=response.status_code)


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(method=request.method, path=request.path)
    return log


def _describe(exc: Exception, payload: Any) -> Tuple[str, str, Optional[Any]]:
    for exc_type, code, fallback in API_ERROR_CODES:
        if isinstance(exc, exc_type):
            break
    else:
        code, fallback = "REQUEST_FAILED", "Request failed"
    if isinstance(exc, ValidationError):
        # Field errors travel as details; the message stays generic.
        return code, fallback, payload
    detail = payload.get("detail") if isinstance(payload, dict) else None
    return code, str(detail) if detail else fallback, None


__all__ = ["ApplicationError", "global_exception_handler"]
