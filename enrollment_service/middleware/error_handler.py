"""
Exception handlers translating service and upstream errors into
structured JSON responses.
"""

import logging
from datetime import datetime, timezone

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from enrollment_service.core.exceptions import EnrollmentServiceError

logger = logging.getLogger(__name__)


def _error_body(request: Request, code: str, message: str, **extra) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": request.url.path,
            **extra,
        }
    }


async def app_error_handler(
    request: Request, error: EnrollmentServiceError
) -> JSONResponse:
    """Handle errors raised by the service layer"""
    logger.warning(
        f"{error.error_code} on {request.method} {request.url.path}: {error.message}"
    )
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(request, error.error_code, error.message, **error.details),
    )


async def validation_error_handler(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    """Handle request body/query validation errors"""
    errors = [
        {
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]
    logger.warning(f"Validation error on {request.url.path}: {len(errors)} field(s)")
    return JSONResponse(
        status_code=400,
        content=_error_body(
            request,
            "INVALID_DATA",
            "Request validation failed",
            validation_errors=errors,
        ),
    )


async def upstream_timeout_handler(
    request: Request, error: httpx.TimeoutException
) -> JSONResponse:
    """Postal service did not answer in time"""
    logger.error(f"Upstream timeout on {request.url.path}: {error}")
    return JSONResponse(
        status_code=504,
        content=_error_body(
            request, "UPSTREAM_TIMEOUT", "Postal code service timed out"
        ),
    )


async def upstream_unavailable_handler(
    request: Request, error: httpx.RequestError
) -> JSONResponse:
    """Postal service could not be reached"""
    logger.error(f"Upstream request failed on {request.url.path}: {error}")
    return JSONResponse(
        status_code=502,
        content=_error_body(
            request, "UPSTREAM_UNAVAILABLE", "Postal code service unavailable"
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EnrollmentServiceError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    # Starlette picks the most specific class in the MRO, so timeouts win
    app.add_exception_handler(httpx.TimeoutException, upstream_timeout_handler)
    app.add_exception_handler(httpx.RequestError, upstream_unavailable_handler)
