"""Centralized error handling.

Every failure leaves the app through one of these handlers and is rendered as
the error envelope built by ``storefront.api.responses.error_response``.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.responses import error_response
from storefront.core.exceptions import ApiException, MalformedInputException

logger = logging.getLogger(__name__)

# leading loc entries that only say where the value came from
LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def format_field(loc) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts)


def field_errors(errors) -> List[Dict[str, Any]]:
    return [
        {
            "field": format_field(err.get("loc", ())),
            "message": err.get("msg", "Invalid value"),
            "value": None if err.get("type") == "missing" else err.get("input"),
        }
        for err in errors
    ]


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    logger.warning(
        f"{exc.error_code} on {request.method} {request.url.path}: {exc.message} ({exc.status_code})"
    )
    return error_response(request, exc.status_code, exc.message, exc.errors)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return await api_exception_handler(request, MalformedInputException())

    details = field_errors(errors)
    logger.warning(
        f"Validation error on {request.method} {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}"
    )
    return error_response(request, status.HTTP_400_BAD_REQUEST, "Validation failed", details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # an unsupported method on a known path is reported like an unknown route
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        message = f"Route {request.url.path} not found"
        logger.warning(f"HTTP 404 on {request.method} {request.url.path}: {message}")
        return error_response(request, status.HTTP_404_NOT_FOUND, message)

    message = str(exc.detail)
    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {message}")
    return error_response(request, exc.status_code, message, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
