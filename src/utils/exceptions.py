"""Custom exception classes."""
from typing import Optional


class ValidationError(Exception):
    """Raised when data fails validation."""
    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a value is present but semantically invalid."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message)
        self.field_name = field_name


class NullArgumentError(InvalidArgumentError):
    """Raised when a required value is None."""
    pass


class OutOfRangeError(InvalidArgumentError):
    """Raised when a number must be greater than zero."""
    pass


class DuplicateEntryError(ValidationError):
    """Raised when an item is already part of a collection."""
    pass
