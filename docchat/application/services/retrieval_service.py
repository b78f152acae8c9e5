"""
Retrieval service.

Selects the documents that ground a chat turn or a search request:
direct lookup for a scoped session, otherwise hybrid search with the
ranking order preserved through the persistence re-fetch.

Dependencies: docchat.boundary.db, docchat.boundary.llm, docchat.boundary.vdb
System role: Context retrieval for chat and document search
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docchat.boundary.db.CRUD.document_crud import document_crud
from docchat.boundary.db.models.document_model import DocumentModel
from docchat.boundary.llm.embedding_client import EmbeddingClient
from docchat.boundary.vdb.search_index import HybridSearchIndex

logger = logging.getLogger(__name__)


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None


class RetrievalService:
    """Scoped lookup or ranked hybrid search over documents."""

    def __init__(
        self,
        db: AsyncSession,
        embeddings: EmbeddingClient,
        search_index: HybridSearchIndex,
    ) -> None:
        self.db = db
        self._embeddings = embeddings
        self._search_index = search_index

    async def retrieve(
        self,
        query: str,
        scoped_document_id: UUID | None = None,
        max_results: int = 5,
    ) -> list[DocumentModel]:
        """
        Retrieve candidate documents for a query.

        Args:
            query: User query text
            scoped_document_id: If set, return only this document (no search)
            max_results: Maximum number of search results

        Returns:
            list[DocumentModel]: Documents in ranked order; empty when nothing
            matches or the scoped document does not exist
        """
        if scoped_document_id is not None:
            document = await document_crud.get_by_id(self.db, scoped_document_id)
            return [document] if document is not None else []

        query_vector = await self._embeddings.embed_query(query)
        hits = await self._search_index.search(query, query_vector, max_results=max_results)
        if not hits:
            return []

        ranked_ids = []
        for hit in hits:
            document_id = _parse_uuid(hit.document_id)
            if document_id is None:
                logger.warning(
                    f"{__name__}:retrieve - Skipping malformed index key",
                    extra={"key": hit.document_id},
                )
                continue
            ranked_ids.append(document_id)

        documents = await document_crud.get_many_in_order(self.db, ranked_ids)
        logger.info(
            f"{__name__}:retrieve - {len(documents)} of {len(hits)} hits resolved",
            extra={"max_results": max_results},
        )
        return documents
