#!/usr/bin/env python3
"""
Error handlers for the web application.

Service errors are the kinds defined in core.errors; each carries its HTTP
status. Responses share one shape: {"success": false, "error", "type"}.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import exc as sa_exc

from core.errors import CareerServiceError, DependencyUnavailable, InternalError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, error_type: str, retryable: bool = False) -> JSONResponse:
    content = {
        "success": False,
        "error": error,
        "type": error_type
    }
    if retryable:
        content["retryable"] = True
    return JSONResponse(status_code=status_code, content=content)


async def service_exception_handler(
    request: Request,
    exc: CareerServiceError
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if isinstance(exc, InternalError) or exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    message = "Internal server error" if isinstance(exc, InternalError) else str(exc)
    return _error_response(exc.status_code, message, exc.__class__.__name__, exc.retryable)


async def database_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle store failures raised outside a unit of work (timeouts, lost
    connections, exhausted pool) as a retryable DependencyUnavailable.
    """
    logger.error(f"Data store error in {request.url.path}: {exc}")
    return _error_response(503, "data store unavailable or timed out", DependencyUnavailable.__name__, True)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies and parameters are a 400 ValidationError."""
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return _error_response(400, details or "Invalid request", "ValidationError")


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return _error_response(500, "Internal server error", "InternalError")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(CareerServiceError, service_exception_handler)
    app.add_exception_handler(sa_exc.OperationalError, database_exception_handler)
    app.add_exception_handler(sa_exc.TimeoutError, database_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
