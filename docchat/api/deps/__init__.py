"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_completion_client,
    get_document_service,
    get_retrieval_service,
    get_service_cache,
    get_template_store,
)

__all__ = [
    "get_chat_service",
    "get_completion_client",
    "get_document_service",
    "get_retrieval_service",
    "get_service_cache",
    "get_template_store",
]
