"""
Exception hierarchy for the document Q&A pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Capability failures (embedding, vector search, generation) are not wrapped
on the request path; these types cover local contract violations and setup.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """Base exception for all document Q&A errors."""

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


class ValidationError(DocQAException):
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


class EmbeddingDimensionError(ValidationError):
    """Raised when a vector does not have the system embedding dimension."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected: Configured embedding dimension
            actual: Length of the offending vector
            details: Additional context
        """
        details = details or {}
        details.update({"expected": expected, "actual": actual})
        super().__init__(
            f"Embedding dimension mismatch: expected {expected}, got {actual}",
            field="vector",
            details=details,
        )


class VectorStoreError(DocQAException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (probe_collection, create_collection)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class CollectionSetupError(VectorStoreError):
    """Raised when the collection cannot be verified or created."""

    pass


class StreamConsumedError(DocQAException):
    """Raised when an answer stream is iterated more than once."""

    pass
