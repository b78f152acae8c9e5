"""
Document CRUD operations.

Provides Create, Read, Update, Delete operations for DocumentModel
with document-specific queries for listing, ranked re-fetch, and
search-index status tracking.

Dependencies: sqlalchemy, docchat.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from docchat.boundary.db.models.chat_session_model import ChatSessionModel
from docchat.boundary.db.models.document_model import DocumentModel, IndexStatus
from docchat.boundary.db.CRUD.base_crud import BaseCRUD


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with ordering-aware reads and a delete that detaches
    chat sessions instead of cascading to them.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def get_all_recent_first(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve documents ordered by upload time, newest first.

        Args:
            session: Async database session
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of DocumentModels
        """
        stmt = (
            select(DocumentModel)
            .order_by(DocumentModel.uploaded_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_many_in_order(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
    ) -> list[DocumentModel]:
        """
        Fetch documents by id, returned in the order of ``ids``.

        Ids with no matching row are skipped.

        Args:
            session: Async database session
            ids: Document ids in the desired order

        Returns:
            list[DocumentModel]: Matching documents in caller order
        """
        by_id = {doc.id: doc for doc in await self.get_by_ids(session, ids)}
        return [by_id[doc_id] for doc_id in ids if doc_id in by_id]

    async def get_by_index_status(
        self,
        session: AsyncSession,
        status: IndexStatus,
        limit: int | None = None,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve documents by search index synchronisation state.

        Args:
            session: Async database session
            status: Index status to filter by
            limit: Maximum number of documents to return

        Returns:
            Sequence of DocumentModels with matching status
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.index_status == status)
            .order_by(DocumentModel.uploaded_at)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_detaching_sessions(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a document and clear its reference on chat sessions.

        The explicit UPDATE gives SET NULL semantics on backends where
        foreign key actions are not enforced (SQLite without PRAGMA).

        Args:
            session: Async database session
            id: Document UUID

        Returns:
            True if the document was deleted, False if not found
        """
        await session.execute(
            update(ChatSessionModel)
            .where(ChatSessionModel.document_id == id)
            .values(document_id=None)
            .execution_options(synchronize_session="fetch")
        )
        return await self.delete_by_id(session, id)


document_crud = DocumentCRUD()
