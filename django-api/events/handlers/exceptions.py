"""Translate exceptions raised while handling a request into error responses.

Every error body has the same shape: status, error code, user-safe message,
request path and timestamp. Validation failures also list per-field errors.
Internal details of unexpected exceptions are logged, never returned.
"""

import logging
from typing import Any

from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NO_EVENTS_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FILTER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_DATES: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_PRICE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_EVENT: status.HTTP_409_CONFLICT,
}


def error_body(
    status_code: int,
    error: str,
    message: str,
    path: str,
    errors: dict[str, Any] | None = None,
) -> dict[str, Any]:
    body = {
        "status": status_code,
        "error": error,
        "message": message,
        "path": path,
        "timestamp": timezone.now().isoformat().replace("+00:00", "Z"),
    }
    if errors is not None:
        body["errors"] = errors
    return body


def _messages(detail: Any) -> Any:
    if isinstance(detail, dict):
        return {field: _messages(value) for field, value in detail.items()}
    if isinstance(detail, list):
        return [_messages(item) if isinstance(item, (dict, list)) else str(item) for item in detail]
    return [str(detail)]


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    request = context.get("request")
    path = request.path if request is not None else ""

    if isinstance(exc, DomainError):
        status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        logger.info("%s on %s: %s", exc.code.value, path, exc.details or exc.message)
        return Response(error_body(status_code, exc.code.value, exc.message, path), status=status_code)

    if isinstance(exc, exceptions.ValidationError):
        errors = _messages(exc.detail)
        if not isinstance(errors, dict):
            errors = {"non_field_errors": errors}
        return Response(
            error_body(
                status.HTTP_400_BAD_REQUEST,
                "VALIDATION_FAILED",
                "Request validation failed",
                path,
                errors=errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        logger.error("Unhandled error on %s", path, exc_info=exc)
        return Response(
            error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An unexpected error occurred",
                path,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code = getattr(exc.detail, "code", None) or exc.default_code
    response.data = error_body(response.status_code, str(code).upper(), str(exc.detail), path)
    return response
