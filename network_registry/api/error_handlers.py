"""
Exception Handlers
==================

Turn use case errors and request validation failures into the JSON error
envelope:

    {"error": {"code": ..., "message": ..., "details": [...]},
     "requestId": ..., "timestamp": ...}
"""
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from network_registry.application.dto.network_dto import ErrorDetail, ErrorResponse, FieldErrorDetail
from network_registry.application.errors import (
    INTERNAL_ERROR_MESSAGE,
    InternalError,
    UseCaseError,
    ValidationFailedError,
)
from network_registry.core.logging import get_request_id
from network_registry.utils.datetime_utils import now, to_iso

logger = logging.getLogger(__name__)


def build_error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[List[Dict[str, str]]] = None,
) -> JSONResponse:
    """Build the JSON error envelope for a failed request."""
    body = ErrorResponse(
        error=ErrorDetail(
            code=code,
            message=message,
            details=[FieldErrorDetail(**detail) for detail in details] if details else None,
        ),
        request_id=get_request_id(),
        timestamp=to_iso(now()),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def _field_name(location: tuple) -> str:
    # ("body", "chainId") -> "chainId"; ("body",) -> "body"
    parts = [str(part) for part in location if part != "body"]
    return ".".join(parts) if parts else "body"


async def handle_use_case_error(request: Request, exc: UseCaseError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s %s failed with an internal error", request.method, request.url.path)
    return build_error_response(exc.status_code, exc.code, exc.message, exc.details)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": _field_name(tuple(error.get("loc", ()))), "message": error.get("msg", "invalid")}
        for error in exc.errors()
    ]
    logger.info("Rejected %s %s: %d invalid field(s)", request.method, request.url.path, len(details))
    return build_error_response(
        status.HTTP_400_BAD_REQUEST,
        ValidationFailedError.code,
        "Validation failed",
        details,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return build_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        InternalError.code,
        INTERNAL_ERROR_MESSAGE,
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Register all error handlers on the application."""
    application.add_exception_handler(UseCaseError, handle_use_case_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_error)
