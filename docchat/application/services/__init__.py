"""Service orchestrators."""

from .chat_service import ChatService
from .document_service import DocumentService, IncomingFile
from .retrieval_service import RetrievalService

__all__ = [
    "ChatService",
    "DocumentService",
    "IncomingFile",
    "RetrievalService",
]
