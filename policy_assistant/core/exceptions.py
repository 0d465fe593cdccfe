"""
Exception hierarchy for the policy assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PolicyAssistantException(Exception):
    """Base exception for all policy assistant errors."""

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


class ValidationError(PolicyAssistantException):
    """Raised when client input validation fails."""

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


class DocumentProcessingError(PolicyAssistantException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_name: Name of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_name:
            details["document_name"] = document_name
        super().__init__(message, details)


class ExtractionError(DocumentProcessingError):
    """Raised when text cannot be extracted from an uploaded payload."""


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails."""


class DimensionMismatchError(PolicyAssistantException):
    """Raised when a vector does not fit the collection's configured size."""

    def __init__(self, expected: int, actual: int, collection: str | None = None) -> None:
        details: dict[str, Any] = {"expected": expected, "actual": actual}
        if collection:
            details["collection"] = collection
        super().__init__(
            f"Vector dimension mismatch: expected {expected}, got {actual}",
            details,
        )
        self.expected = expected
        self.actual = actual


class VectorStoreError(PolicyAssistantException):
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
            operation: Operation that failed (ensure_collection, upsert, search)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class GenerationError(PolicyAssistantException):
    """Raised when the answer model call fails."""


class ResponseParseError(PolicyAssistantException):
    """Raised when model output is neither a fallback phrase nor valid JSON."""

    def __init__(self, raw_text: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["raw_length"] = len(raw_text)
        super().__init__("Model response is not valid JSON", details)
        self.raw_text = raw_text
