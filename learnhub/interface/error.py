"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from learnhub.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from learnhub.util.jwt import JWTError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Raised when a bearer token is required but missing or unusable."""

    pass


# Most specific first: lookups walk this in order
ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: Exception) -> int:
    """HTTP status code for an error raised while serving a request."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Render a known error as ``{"detail": message}``."""
    status_code = status_for(exc)
    logfire.warn(
        "Request failed",
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
        method=request.method,
        path=request.url.path,
    )
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    return JSONResponse(
        status_code=status_code, content={"detail": str(exc)}, headers=headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register one exception handler per error kind."""
    for error_type, _ in ERROR_STATUS:
        app.add_exception_handler(error_type, handle_error)
