"""Interface layer error handling.

Domain errors propagate out of the use cases unchanged and are translated
to HTTP responses here, in one place.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from forum.domain.error import (
    AuthenticationError,
    DomainError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
    StorageUnavailableError,
)

# Most specific first; the first matching class wins
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as a JSON response."""
    status_code = status_for(exc)

    if isinstance(exc, StorageUnavailableError):
        logfire.error(
            "Storage unavailable",
            path=request.url.path,
            operation=exc.operation,
            error=str(exc),
        )
        detail = "Storage is temporarily unavailable"
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            error_type=type(exc).__name__,
            status_code=status_code,
            error=str(exc),
        )
        detail = str(exc)

    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
