"""Translation of domain exceptions into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.services.exceptions import (
    EmailTaken,
    InvalidCredentials,
    NotFound,
    ServiceError,
    Unauthorized,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins
STATUS_CODES: list[tuple[type[ServiceError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentials, status.HTTP_401_UNAUTHORIZED),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (EmailTaken, status.HTTP_409_CONFLICT),
]


def status_for(exc: ServiceError) -> int:
    """Get the HTTP status code for a service exception."""
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Return the exception message with its mapped status code."""
    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content={"detail": exc.message}, headers=headers)


async def request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 instead of 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def database_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Hide store failures behind a generic server error."""
    logger.exception("Unhandled database error", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on the application."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
