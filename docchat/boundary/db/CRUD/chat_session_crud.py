"""
Chat session CRUD operations.

Provides Create, Read, Update, Delete operations for ChatSessionModel
with eager loading of the scoped document and ordered messages.

Dependencies: sqlalchemy, docchat.boundary.db.models
System role: Chat session persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from docchat.boundary.db.models.chat_message_model import ChatMessageModel
from docchat.boundary.db.models.chat_session_model import ChatSessionModel
from docchat.boundary.db.CRUD.base_crud import BaseCRUD


class ChatSessionCRUD(BaseCRUD[ChatSessionModel]):
    """
    CRUD operations for ChatSessionModel.

    Extends BaseCRUD with session-specific queries including eager loading
    of the scoped document and the timestamp-ordered message history.
    """

    def __init__(self) -> None:
        """Initialize ChatSessionCRUD with ChatSessionModel."""
        super().__init__(ChatSessionModel)

    async def get_with_history(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> ChatSessionModel | None:
        """
        Retrieve session with its document and messages eagerly loaded.

        Messages are ordered by timestamp ascending (relationship order_by).

        Args:
            session: Async database session
            id: Chat session UUID

        Returns:
            ChatSessionModel with relations loaded, None if not found
        """
        stmt = (
            select(ChatSessionModel)
            .where(ChatSessionModel.id == id)
            .options(
                selectinload(ChatSessionModel.document),
                selectinload(ChatSessionModel.messages),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_recently_updated(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ChatSessionModel]:
        """
        Retrieve sessions ordered by last update, newest first.

        Args:
            session: Async database session
            limit: Maximum number of sessions to return
            offset: Number of sessions to skip

        Returns:
            Sequence of ChatSessionModels with document loaded
        """
        stmt = (
            select(ChatSessionModel)
            .options(selectinload(ChatSessionModel.document))
            .order_by(ChatSessionModel.last_updated_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_with_messages(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a session and all of its messages.

        Args:
            session: Async database session
            id: Chat session UUID

        Returns:
            True if the session was deleted, False if not found
        """
        await session.execute(
            delete(ChatMessageModel).where(ChatMessageModel.chat_session_id == id)
        )
        return await self.delete_by_id(session, id)


chat_session_crud = ChatSessionCRUD()
