"""
Core business logic module.

Contains the exception hierarchy and prompt assembly. Nothing here
touches a provider or the database.
"""

from docchat.core.exceptions import (
    ChatSessionNotFoundError,
    CompletionError,
    DocChatException,
    DocumentAnalysisError,
    DocumentNotFoundError,
    DocumentProcessingError,
    EmbeddingError,
    ExternalServiceError,
    NotFoundError,
    SearchIndexError,
    StorageError,
    ValidationError,
)

__all__ = [
    "DocChatException",
    "ValidationError",
    "NotFoundError",
    "DocumentNotFoundError",
    "ChatSessionNotFoundError",
    "ExternalServiceError",
    "StorageError",
    "DocumentAnalysisError",
    "EmbeddingError",
    "SearchIndexError",
    "CompletionError",
    "DocumentProcessingError",
]
