"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, utc_now: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - DocumentModel, ChatSessionModel, ChatMessageModel: Core domain entities
  - IndexStatus, MessageRole: Enum types
  - document_crud, chat_session_crud, chat_message_crud: CRUD operation singletons

Dependencies: sqlalchemy, docchat.configs
System role: Database adapter providing persistent storage for documents,
chat sessions, and chat messages.
"""

from docchat.boundary.db.base import Base, UUIDMixin, utc_now
from docchat.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from docchat.boundary.db.models import (
    ChatMessageModel,
    ChatSessionModel,
    DocumentModel,
    IndexStatus,
    MessageRole,
)
from docchat.boundary.db.CRUD import (
    BaseCRUD,
    ChatMessageCRUD,
    ChatSessionCRUD,
    DocumentCRUD,
    chat_message_crud,
    chat_session_crud,
    document_crud,
)

__all__ = [
    # Base classes
    "Base",
    "UUIDMixin",
    "utc_now",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "DocumentModel",
    "IndexStatus",
    "ChatSessionModel",
    "ChatMessageModel",
    "MessageRole",
    # CRUD classes
    "BaseCRUD",
    "DocumentCRUD",
    "ChatSessionCRUD",
    "ChatMessageCRUD",
    # CRUD singletons
    "document_crud",
    "chat_session_crud",
    "chat_message_crud",
]
