"""
Custom exception classes for the registration service.

Each error carries the HTTP status it is reported with and a message that is
safe to return to the caller.
"""


class RegistrationError(Exception):
    """Base class for all errors reported to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(RegistrationError):
    """Raised when the caller's input fails validation."""

    status_code = 400


class DuplicateEmail(InvalidInput):
    """Raised when the email address is already registered."""

    pass


class NotFound(RegistrationError):
    """Raised when no user matches the requested identifier."""

    status_code = 404


class PersistenceError(RegistrationError):
    """Raised when the database reports an unexpected failure."""

    status_code = 500
