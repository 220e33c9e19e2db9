# /app/core/errors.py

"""
Error taxonomy shared by the view services and the routers.

Services raise the specific subclasses below. Each router endpoint wraps its
work in `endpoint_errors(...)`, which lets client-facing errors (400/401/404)
through untouched and turns every other failure, upstream ones included, into
a logged, generic 500. The exception handler registered in `main.py` renders
all of them as `{"success": false, "message": ...}`.
"""

import logging
from contextlib import contextmanager

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    """Base class for every error that maps to an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DashboardError):
    """A required request input is missing."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DashboardError):
    """A lookup key matched no record."""

    status_code = status.HTTP_404_NOT_FOUND


class AuthenticationError(NotFoundError):
    """An employee ID matched no Authentication row."""

    status_code = status.HTTP_401_UNAUTHORIZED


class UpstreamError(DashboardError):
    """The table store is unreachable or returned something unusable."""


class ServerError(DashboardError):
    """Generic 500 surfaced to the client; the cause is only logged."""


def error_payload(message: str) -> dict:
    return {"success": False, "message": message}


async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc.message))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed request bodies are client errors and share the error body shape.
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload("Invalid request"),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Last resort for failures outside an endpoint boundary, e.g. a response
    # that does not match its response_model.
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload("Internal server error"),
    )


@contextmanager
def endpoint_errors(generic_message: str):
    """
    Boundary for one endpoint's assembly pipeline.

    Args:
        generic_message: The message returned to the client on any failure
            that is not a 400/401/404.
    """
    try:
        yield
    except (ValidationError, NotFoundError):
        raise
    except Exception as e:
        logger.exception("%s: %s", generic_message, e)
        raise ServerError(generic_message) from e
