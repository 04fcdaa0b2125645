"""Error taxonomy and the request-boundary translation table.

Services raise subclasses of ``DomainError``; they never build HTTP
responses.  ``api_exception_handler`` (DRF ``EXCEPTION_HANDLER``) maps each
error kind to a status code through ``ERROR_STATUS_TABLE`` and renders the
``{"message": ...}`` body.  Every handled error marks the current transaction
for rollback.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.core.constants import ResponseMessage

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Base class for every business-level failure."""

    default_message: str = ResponseMessage.UNEXPECTED_ERROR.value

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ResourceNotFound(DomainError):
    """A user, order or product does not exist (or is soft-deleted)."""


class InvalidCredentials(DomainError):
    """Email/password pair does not match."""

    default_message = ResponseMessage.INVALID_CREDENTIALS.value


class Unauthorized(DomainError):
    """The principal may not act on the resource (ownership, inactive account)."""


class BusinessRuleViolation(DomainError):
    """A business invariant would be broken (e.g. stock below zero)."""


class InvalidInput(DomainError):
    """Well-formed input the current data rejects; rendered like a validation error."""

    field: str = "non_field_errors"


ERROR_STATUS_TABLE: dict[type[DomainError], int] = {
    ResourceNotFound: status.HTTP_404_NOT_FOUND,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    Unauthorized: status.HTTP_403_FORBIDDEN,
    BusinessRuleViolation: status.HTTP_409_CONFLICT,
    InvalidInput: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def status_for(exc: DomainError) -> int:
    """Resolve the HTTP status of *exc* by walking its class hierarchy."""
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS_TABLE:
            return ERROR_STATUS_TABLE[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    view = context.get("view")
    log = logger.bind(view=type(view).__name__ if view else None)

    if isinstance(exc, DomainError):
        status_code = status_for(exc)
        log.warning(
            "api.domain_error",
            error=type(exc).__name__,
            detail=exc.message,
            status_code=status_code,
        )
        set_rollback()
        if isinstance(exc, InvalidInput):
            return _validation_response({exc.field: [exc.message]})
        return Response({"message": exc.message}, status=status_code)

    if isinstance(exc, ValidationError):
        log.info("api.validation_failed", fields=_error_fields(exc.detail))
        set_rollback()
        errors = exc.detail if isinstance(exc.detail, dict) else {
            "non_field_errors": exc.detail
        }
        return _validation_response(errors)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"message": _flatten_detail(response.data)}
        return response

    log.error("api.unexpected_error", error=type(exc).__name__, exc_info=exc)
    set_rollback()
    return Response(
        {"message": ResponseMessage.UNEXPECTED_ERROR.value},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _validation_response(errors: Any) -> Response:
    return Response(
        {"message": ResponseMessage.VALIDATION_FAILED.value, "errors": errors},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


def _flatten_detail(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    if isinstance(data, list) and data:
        return str(data[0])
    return str(data)


def _error_fields(detail: Any) -> list[str]:
    return sorted(detail) if isinstance(detail, dict) else []
