"""HTTP error handlers for the FastAPI application.

Maps domain exceptions to HTTP status codes so services stay free of HTTP
concerns. Every error body has the shape `{"detail": "<message>"}`.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.exceptions import (
    AppException,
    NotFoundError,
    AlreadyExistsError,
    ValidationError,
    AuthenticationError,
    InsufficientPermissionsError,
    InvalidStateError,
)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Map a NotFoundError to 404."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def already_exists_handler(
    request: Request, exc: AlreadyExistsError
) -> JSONResponse:
    """
    Convert an AlreadyExistsError into 409 Conflict.

    The request conflicts with existing data (duplicate username, category name, ...).
    """
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def invalid_state_handler(
    request: Request, exc: InvalidStateError
) -> JSONResponse:
    """
    Convert an InvalidStateError into 409 Conflict.

    Used when a join request has already left PENDING. The body carries the
    current state so clients can refresh their view.
    """
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc), "state": exc.current_state},
    )


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """
    Convert a ValidationError into 422, adding `field` when the error names one.
    """
    content = {"detail": str(exc)}
    if exc.field:
        content["field"] = exc.field
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, content=content
    )


async def insufficient_permissions_handler(
    request: Request, exc: InsufficientPermissionsError
) -> JSONResponse:
    """Map an InsufficientPermissionsError (and NotAuthorizedError) to 403."""
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)}
    )


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    """
    Convert an AuthenticationError into 401 with a `WWW-Authenticate: Bearer` header.
    """
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle any other application exception with a generic 500.

    The message is logged, never returned to the client.
    """
    logger.opt(exception=exc).error(
        f"Unhandled application error on {request.method} {request.url.path}: {exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal error occurred"},
    )


def register_exception_handlers(app) -> None:
    """
    Attach the domain-to-HTTP exception handlers to a FastAPI app.

    Starlette resolves handlers along the exception's MRO, so subclasses
    (NotAuthorizedError under InsufficientPermissionsError, which itself sits
    under AuthenticationError) reach their most specific handler.

    Mappings: NotFoundError -> 404, AlreadyExistsError -> 409,
    InvalidStateError -> 409, ValidationError -> 422,
    InsufficientPermissionsError -> 403, AuthenticationError -> 401,
    AppException -> 500.
    """
    # CRUD exception handlers
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(AlreadyExistsError, already_exists_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)

    # Workflow
    app.add_exception_handler(InvalidStateError, invalid_state_handler)

    # Auth exception handlers
    app.add_exception_handler(
        InsufficientPermissionsError, insufficient_permissions_handler
    )
    app.add_exception_handler(AuthenticationError, authentication_error_handler)

    # Catch-all for unhandled application exceptions
    app.add_exception_handler(AppException, app_exception_handler)
