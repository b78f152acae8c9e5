"""
Exception hierarchy for the document chat application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocChatException(Exception):
    """Base exception for all document chat application errors."""

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


class ValidationError(DocChatException):
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


class NotFoundError(DocChatException):
    """Base for lookups that resolve to nothing."""


class DocumentNotFoundError(NotFoundError):
    """Raised when a document cannot be found."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class ChatSessionNotFoundError(NotFoundError):
    """Raised when a chat session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["session_id"] = session_id
        super().__init__(f"Chat session not found: {session_id}", details)


class ExternalServiceError(DocChatException):
    """Base for failures reported by a downstream provider."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize external service error.

        Args:
            message: Error message
            operation: Provider operation that failed (upload, analyze, query, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StorageError(ExternalServiceError):
    """Raised when object storage operations fail."""


class DocumentAnalysisError(ExternalServiceError):
    """Raised when OCR text extraction fails or times out."""


class EmbeddingError(ExternalServiceError):
    """Raised when embedding generation fails."""


class SearchIndexError(ExternalServiceError):
    """Raised when search index operations fail."""


class CompletionError(ExternalServiceError):
    """Raised when the chat completion call fails."""


class DocumentProcessingError(DocChatException):
    """Raised when any step of document ingestion fails."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document if it was already persisted
            file_name: Name of the uploaded file
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details)
