"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from docchat.boundary.db.CRUD import document_crud, chat_session_crud

    # Use singleton instances
    document = await document_crud.get_by_id(db, document_id)

    # Or instantiate classes directly for custom behavior
    from docchat.boundary.db.CRUD import DocumentCRUD
    custom_crud = DocumentCRUD()
"""

from docchat.boundary.db.CRUD.base_crud import BaseCRUD
from docchat.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from docchat.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from docchat.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud

__all__ = [
    "BaseCRUD",
    "DocumentCRUD",
    "document_crud",
    "ChatSessionCRUD",
    "chat_session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
]
