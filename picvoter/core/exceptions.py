"""
Exception hierarchy for the picvoter image ranking store.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PicvoterException(Exception):
    """Base exception for all picvoter application errors."""

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


class ValidationError(PicvoterException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ImageNotFoundError(PicvoterException):
    """Raised when a referenced image id does not exist."""

    def __init__(self, image_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize image not found error.

        Args:
            image_id: ID of the missing image
            details: Additional context
        """
        self.image_id = image_id
        details = details or {}
        details["image_id"] = image_id
        super().__init__(f"Image not found: {image_id}", details)


class ImageConflictError(PicvoterException):
    """Raised when an insert collides with an existing row."""

    def __init__(self, image_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize image conflict error.

        Args:
            image_id: ID that collided
            details: Additional context
        """
        self.image_id = image_id
        details = details or {}
        details["image_id"] = image_id
        super().__init__(f"Image already exists: {image_id}", details)


class StorageError(PicvoterException):
    """Raised when a persistence operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Store operation that failed (insert, record_vote, ...)
            details: Additional context
        """
        self.operation = operation
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class TransientStorageError(StorageError):
    """Raised for storage failures worth retrying (contention, lost connection)."""

    pass


class StorageTimeoutError(TransientStorageError):
    """Raised when a store operation exceeds its time budget."""

    pass


class CommitOutcomeUnknownError(StorageError):
    """
    Raised when a write failed or timed out after its commit was sent.

    The database may or may not have applied the transaction, so the write
    is not repeated; callers must re-read before deciding to resubmit.
    """

    pass
