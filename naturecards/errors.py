"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when a document or request payload is malformed."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class AuthenticationError(AppError):
    """Raised when a route needs a signed-in user and there is none."""

    def __init__(self, message="You must be signed in."):
        """Initialize the error."""
        super().__init__(message, 401)


class NotFoundError(AppError):
    """Raised when an expected document or relationship is missing."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class ConflictError(AppError):
    """Raised for duplicate friend requests or existing friendships."""

    def __init__(self, message="Resource already exists."):
        """Initialize the error."""
        super().__init__(message, 409)


class NetworkError(AppError):
    """Raised when the document store cannot be reached or answers badly."""

    def __init__(self, message="The document store is unavailable."):
        """Initialize the error."""
        super().__init__(message, 503)
