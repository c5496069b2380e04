# =============================================================================
# app/exceptions.py - Exception Handlers
# =============================================================================
# Centralized handling for errors that escape the route handlers.
# Product routes catch their own errors; these handlers cover request
# parsing failures and anything raised outside those handlers.
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle request validation errors (e.g. a body that is not valid JSON).

    Converts validation errors to a structured 422 response.
    """
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc),
        }
    )


async def internal_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
