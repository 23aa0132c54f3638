"""
Custom exception classes for the application.

Each exception carries the HTTP status the shared error handler renders it
with. Field-level validation problems are never raised: they travel back to
the form as data (see catalog.validation).
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for the rendered error page.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Request data failed a check that cannot be shown inline on a form.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class IdentityMismatchError(ValidationError):
    """
    The author id submitted with the delete form differs from the path id.

    HTTP Status: 400 Bad Request
    """


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a requested resource does not exist.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when the record store is unavailable or a query fails.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
