"""
Custom exceptions for the application.
"""
from typing import Optional


class TranslatorException(Exception):
    """Base exception for all Translation API exceptions."""
    pass


class ValidationError(TranslatorException):
    """Raised when caller-supplied input violates a precondition."""
    pass


class StoreError(TranslatorException):
    """Raised when a query or statement against a connected store fails.

    The message is safe to show to clients; the backend detail travels as
    ``__cause__`` and is only logged.
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class StoreConnectionError(TranslatorException):
    """Raised when the store is unreachable or the liveness probe fails."""
    pass
