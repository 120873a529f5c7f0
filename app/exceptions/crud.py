"""CRUD-related exceptions for database operations."""

from app.exceptions.base import AppException


class NotFoundError(AppException):
    """Resource not found in the database."""

    def __init__(self, resource: str, identifier: int | str):
        """
        Initialize a NotFoundError for a missing resource.

        Parameters:
            resource (str): Name of the missing resource (for example, "Project").
            identifier (int | str): The identifier that was looked up.

        The message reads "<resource> with identifier '<identifier>' not found".
        """
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with identifier '{identifier}' not found")


class AlreadyExistsError(AppException):
    """Resource already exists (unique constraint violation)."""

    def __init__(self, resource: str, field: str, value: int | str):
        """
        Parameters:
            resource (str): Name of the resource type (for example, "Category").
            field (str): The field that must be unique (for example, "name").
            value (int | str): The conflicting value.
        """
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} with {field}='{value}' already exists")


class ValidationError(AppException):
    """Business rule validation failed."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
