"""Exceptions for the SafeDict toolkit."""

from typing import Optional


class SafeDictException(Exception):
    """Base exception for all SafeDict toolkit errors."""

    pass


class InvalidArgument(SafeDictException, TypeError):
    """Raised when a dict is built from, or given, something it cannot accept.

    Covers malformed initial sources, non-string keys, attempts to store the
    absence marker, and seed files that fail validation.
    """

    pass


class ImmutableWriteRejected(SafeDictException, AttributeError):
    """Raised when a caller writes to a SafeDict without going through ``set``."""

    def __init__(self, operation: str, name: Optional[str] = None):
        """Initialize ImmutableWriteRejected with the rejected operation.

        Args:
            operation: The operation that was attempted (e.g. "attribute assignment")
            name: The attribute or item name the operation targeted
        """
        if name is not None:
            message = f"Cannot perform {operation} on SafeDict ({name!r}); use set() and delete() instead"
        else:
            message = f"Cannot perform {operation} on SafeDict; use set() and delete() instead"
        super().__init__(message)
        self.operation = operation
        self.name = name
