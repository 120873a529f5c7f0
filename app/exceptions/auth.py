"""Authentication and authorization exceptions."""

from app.exceptions.base import AppException


class AuthenticationError(AppException):
    """Base class for authentication-related errors."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Username or password is incorrect."""

    def __init__(self, message: str = "Incorrect username or password"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Bearer token is invalid, of the wrong type, or refers to an unknown account."""

    def __init__(self, message: str = "Could not validate credentials"):
        """
        Initialize the InvalidTokenError.

        Parameters:
            message (str): Description of the token problem. Defaults to "Could not validate credentials".
        """
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Token signature is valid but its `exp` claim is in the past."""

    def __init__(self, token_type: str = "access"):
        """
        Initialize a TokenExpiredError for a specific token type.

        Parameters:
            token_type (str): Type of the expired token ("access" or "refresh"); kept on the instance as `token_type`.
        """
        super().__init__(f"{token_type.capitalize()} token has expired")
        self.token_type = token_type


class InsufficientPermissionsError(AuthenticationError):
    """Caller is authenticated but not allowed to perform this action."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)
