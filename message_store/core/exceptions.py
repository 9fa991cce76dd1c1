"""
Exception hierarchy for the message store.

Provides layered exception structure for store-specific errors.
All exceptions include context for observability and debugging.
Backend failures are not wrapped: SQLAlchemy errors reach the caller unchanged.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the package
"""

from typing import Any


class MessageStoreException(Exception):
    """Base exception for all message store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgumentError(MessageStoreException, ValueError):
    """Raised when an operation receives arguments it does not support."""

    def __init__(
        self,
        message: str,
        options: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            options: Names of the rejected options
            details: Additional context
        """
        details = details or {}
        if options:
            details["options"] = options
        super().__init__(message, details)


class MessageSerializationError(MessageStoreException):
    """Raised when messages cannot be encoded or a stored payload cannot be decoded."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize serialization error.

        Args:
            message: Error message
            operation: Codec operation that failed (serialize, deserialize)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
