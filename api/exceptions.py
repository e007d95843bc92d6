"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error body has the shape
``{"success": false, "error": {"code": ..., "message": ...}}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core import metrics
from core.domain.exceptions import (
    CodeAlreadyAssignedError,
    CodeNotFoundError,
    ContentionError,
    DomainException,
    InvalidCodeValueError,
    InvalidProductUpdateError,
    NoStockError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    ((ProductNotFoundError, NoStockError, CodeNotFoundError), status.HTTP_404_NOT_FOUND),
    ((ContentionError, CodeAlreadyAssignedError, ProductAlreadyExistsError), status.HTTP_409_CONFLICT),
    ((InvalidProductUpdateError, InvalidCodeValueError), status.HTTP_400_BAD_REQUEST),
    ((StoreUnavailableError,), status.HTTP_503_SERVICE_UNAVAILABLE),
)


def error_body(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    """Build the error envelope used by every API response."""
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}


def status_for(exc: DomainException) -> int:
    """Return the HTTP status a domain exception maps to."""
    for exception_types, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exception_types):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response:
            code = (
                exc.default_code.upper().replace("-", "_")
                if hasattr(exc, "default_code")
                else "API_ERROR"
            )
            detail = exc.default_detail
            if isinstance(response.data, dict):
                detail = response.data.get("detail", detail)
            response.data = error_body(code, str(detail))
            if trace_id:
                response["X-Trace-ID"] = trace_id
            return response

    if isinstance(exc, Http404):
        response = Response(
            error_body("NOT_FOUND", "Resource not found"),
            status=status.HTTP_404_NOT_FOUND,
        )
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    return _handle_unexpected_exception(exc, context, trace_id)


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", None) or getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status_for(exc)
    metrics.errors_total.labels(code=exc.code).inc()

    if status_code >= 500:
        logger.error("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    else:
        logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response(error_body(exc.code, exc.message), status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    response = exception_handler(exc, context)
    if not response:
        response = Response(
            error_body("INTERNAL_ERROR", "An internal error occurred"),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    else:
        response.data = error_body("INTERNAL_ERROR", "An internal error occurred")
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response
