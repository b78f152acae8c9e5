"""
Chat message CRUD operations.

Append-only writes for ChatMessageModel.

Dependencies: sqlalchemy, docchat.boundary.db.models
System role: Chat message persistence operations
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docchat.boundary.db.models.chat_message_model import ChatMessageModel, MessageRole
from docchat.boundary.db.CRUD.base_crud import BaseCRUD


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        """Initialize ChatMessageCRUD with ChatMessageModel."""
        super().__init__(ChatMessageModel)

    async def add_message(
        self,
        session: AsyncSession,
        chat_session_id: UUID,
        role: MessageRole,
        content: str,
        source_documents: list[dict] | None = None,
    ) -> ChatMessageModel:
        """
        Append a message to a session.

        Args:
            session: Async database session
            chat_session_id: Owning session UUID
            role: Message author
            content: Message text
            source_documents: Serialized {"id", "fileName"} references

        Returns:
            ChatMessageModel: Persisted (flushed) message
        """
        return await self.create(
            session,
            chat_session_id=chat_session_id,
            role=role,
            content=content,
            source_documents=source_documents,
        )


chat_message_crud = ChatMessageCRUD()
