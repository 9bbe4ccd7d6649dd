"""Typed errors raised by the services and the HTTP middleware.

Every error carries the HTTP status it maps to; the terminal handlers in
``storefront.api.error_handlers`` turn them into the error envelope.
"""

from typing import Any, Dict, List, Optional


class ApiException(Exception):
    """Base exception for all errors that end a request."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationException(ApiException):
    """A field constraint or business rule rejected the input."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class MalformedInputException(ApiException):
    """The request body could not be parsed."""

    status_code = 400
    error_code = "MALFORMED_INPUT"

    def __init__(self, message: str = "Invalid JSON format"):
        super().__init__(message)


class NotFoundException(ApiException):
    """An id (or a referenced id) does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"


class ConflictException(ApiException):
    """A unique field already holds the given value."""

    status_code = 409
    error_code = "CONFLICT"


class RateLimitException(ApiException):
    """Too many requests from one client inside the rolling window."""

    status_code = 429
    error_code = "RATE_LIMITED"

    def __init__(self, message: str = "Too many requests from this IP, please try again later."):
        super().__init__(message)
