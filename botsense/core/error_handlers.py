"""
Error handling utilities and exception handlers for the BotSense API.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from botsense.detection.errors import BotSenseError

logger = logging.getLogger(__name__)


def get_json_error_response(
    status_code: int, detail: str | None = None, error_type: str = "api_error"
) -> Dict[str, Any]:
    """Create a standardized JSON error response."""
    error_messages = {
        400: "Bad Request",
        404: "Not Found",
        405: "Method Not Allowed",
        422: "Unprocessable Entity",
        500: "Internal Server Error",
        503: "Service Unavailable",
    }

    message = detail or error_messages.get(status_code, "An error occurred")

    return {"error": {"code": status_code, "message": message, "type": error_type}}


async def fastapi_http_exception_handler(request: Request, exc: HTTPException):
    """Handle FastAPI HTTP exceptions"""
    # Convert FastAPI HTTPException to StarletteHTTPException and reuse handler
    starlette_exc = StarletteHTTPException(
        status_code=exc.status_code, detail=exc.detail
    )
    return await http_exception_handler(request, starlette_exc)


async def http_exception_handler(_: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with JSON responses."""
    error_data = get_json_error_response(exc.status_code, exc.detail)
    return JSONResponse(content=error_data, status_code=exc.status_code)


async def validation_exception_handler(_: Request, exc: RequestValidationError):
    """Handle request validation errors with field level details."""
    error_details = []
    for error in exc.errors():
        error_details.append(
            {
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
        )

    error_data = get_json_error_response(422, "Validation Error", "validation_error")
    error_data["error"]["details"] = error_details
    return JSONResponse(content=error_data, status_code=422)


async def detection_error_handler(_: Request, exc: BotSenseError):
    """Handle detection setup errors that escape to the API (e.g. strict empty registry)"""
    logger.error("Detection error: %s", exc)
    error_data = get_json_error_response(503, str(exc), "detection_error")
    return JSONResponse(content=error_data, status_code=503)


async def not_found_handler(_: Request, exc: HTTPException):
    """Handle 404 errors"""
    error_data = get_json_error_response(404, getattr(exc, "detail", None))
    return JSONResponse(content=error_data, status_code=404)


async def internal_server_error_handler(_: Request, exc: Exception):
    """Handle 500 errors"""
    logger.exception("Unhandled error: %s", exc)
    error_data = get_json_error_response(500)
    return JSONResponse(content=error_data, status_code=500)


def register_error_handlers(app):
    """Register all error handlers with the FastAPI app."""
    app.add_exception_handler(HTTPException, fastapi_http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(BotSenseError, detection_error_handler)
    app.add_exception_handler(404, not_found_handler)
    app.add_exception_handler(500, internal_server_error_handler)
