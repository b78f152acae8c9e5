"""
Database models package.

Exports:
  - DocumentModel, IndexStatus: Document ORM model and index sync state
  - ChatSessionModel: Conversation thread ORM model
  - ChatMessageModel, MessageRole: Conversation turn ORM model and role enum

Dependencies: sqlalchemy, docchat.boundary.db.base
System role: Database model definitions for domain entities
"""

from docchat.boundary.db.models.document_model import DocumentModel, IndexStatus
from docchat.boundary.db.models.chat_session_model import ChatSessionModel
from docchat.boundary.db.models.chat_message_model import ChatMessageModel, MessageRole

__all__ = [
    "DocumentModel",
    "IndexStatus",
    "ChatSessionModel",
    "ChatMessageModel",
    "MessageRole",
]
