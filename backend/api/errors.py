"""
Error handling for the HTTP API.

Module exceptions carry a code, message and details. This is the one place
that turns them into HTTP responses; services never format errors for users.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import (
    CarpoolError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    RequestTimeoutError,
)
from modules.bookings.exceptions import BookingError

from .models import ErrorResponse

logger = logging.getLogger(__name__)

# First match wins, so subclasses must precede their bases.
STATUS_CODES: list[tuple[type[CarpoolError], int]] = [
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (BookingError, 409),
    (ValidationError, 422),
    (RequestTimeoutError, 504),
    (ExternalServiceError, 502),
]

# Documented error bodies for module routers
ERROR_RESPONSES: dict[int | str, dict] = {
    status_code: {"model": ErrorResponse} for _, status_code in STATUS_CODES
}


def status_code_for(error: CarpoolError) -> int:
    """Map a module exception to an HTTP status code."""
    for error_type, status_code in STATUS_CODES:
        if isinstance(error, error_type):
            return status_code
    return 400


async def carpool_error_handler(request: Request, exc: CarpoolError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)

    headers = {"WWW-Authenticate": "Session"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the module exception handler on an app."""
    app.add_exception_handler(CarpoolError, carpool_error_handler)
