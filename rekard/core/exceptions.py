"""
Custom exceptions for the application.
"""


class RekardException(Exception):
    """Base exception for all Rekard application exceptions."""
    pass


class NotFoundError(RekardException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(RekardException):
    """Raised when a request conflicts with the current state."""
    pass


class SessionStateError(ConflictError):
    """Raised when a study session is asked to do something its state does not allow."""
    pass


class PersistenceError(RekardException):
    """Raised when the deck collection cannot be serialized or stored."""
    pass
