"""
Exception handlers.

Maps the shared exception hierarchy to HTTP responses. Authentication
failures keep the fixed plain-text body the login page expects.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    SimplyHappyError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

UNAUTHORIZED_BODY = "UNAUTHORIZED REQUEST!"

STATUS_CODES: list[tuple[type[SimplyHappyError], int]] = [
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


async def authentication_error_handler(request: Request, exc: AuthenticationError):
    logger.debug("Unauthorized %s %s: %s", request.method, request.url.path, exc.code)
    return PlainTextResponse(UNAUTHORIZED_BODY, status_code=401)


async def app_error_handler(request: Request, exc: SimplyHappyError):
    status_code = 500
    for error_type, code in STATUS_CODES:
        if isinstance(exc, error_type):
            status_code = code
            break

    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)

    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details or None)
    return JSONResponse(body.model_dump(exclude_none=True), status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an application."""
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(SimplyHappyError, app_error_handler)
