"""Base exception for all application-level errors."""


class AppException(Exception):
    """Root of the application exception hierarchy."""

    pass
