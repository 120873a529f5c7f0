"""
Domain exceptions raised by services and dependencies.

Services never raise HTTPException; `app/core/error_handlers.py` turns the
classes below into HTTP responses:
- `crud`: missing rows, unique conflicts, rejected values
- `auth`: credentials, tokens and permissions
- `workflow`: join request guards (who may decide, and from which state)
"""

from app.exceptions.base import AppException
from app.exceptions.crud import NotFoundError, AlreadyExistsError, ValidationError
from app.exceptions.auth import (
    AuthenticationError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    InsufficientPermissionsError,
)
from app.exceptions.workflow import NotAuthorizedError, InvalidStateError

__all__ = [
    "AppException",
    "NotFoundError",
    "AlreadyExistsError",
    "ValidationError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "InsufficientPermissionsError",
    "NotAuthorizedError",
    "InvalidStateError",
]
