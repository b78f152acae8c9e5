"""
Document service orchestrator.

Coordinates document ingestion (store → OCR → embed → persist → index),
listing, search, deletion, and re-indexing of documents whose index push
failed.

Dependencies: docchat.boundary.aws, docchat.boundary.llm, docchat.boundary.vdb,
docchat.boundary.db, docchat.application.services.retrieval_service
System role: Document management orchestration
"""

import logging
from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from docchat.application.services.retrieval_service import RetrievalService
from docchat.boundary.aws.s3_client import S3DocumentClient
from docchat.boundary.aws.textract_client import TextractDocumentClient
from docchat.boundary.db.CRUD.document_crud import document_crud
from docchat.boundary.db.models.document_model import DocumentModel, IndexStatus
from docchat.boundary.llm.embedding_client import EmbeddingClient
from docchat.boundary.vdb.search_index import HybridSearchIndex
from docchat.boundary.vdb.vector_schemas import SearchIndexEntry
from docchat.core.exceptions import (
    DocChatException,
    DocumentNotFoundError,
    DocumentProcessingError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncomingFile:
    """An uploaded file as received at the HTTP boundary."""

    file_name: str
    content_type: str
    size_bytes: int
    data: bytes


@dataclass(frozen=True)
class ReindexOutcome:
    reindexed: int
    failed: int


def count_words(text: str) -> int:
    """Whitespace-delimited token count; runs of whitespace count once."""
    return len(text.split())


def to_index_entry(document: DocumentModel) -> SearchIndexEntry:
    """Search index record for a persisted document."""
    return SearchIndexEntry(
        id=document.id,
        file_name=document.file_name,
        content=document.content,
        uploaded_at=document.uploaded_at,
        word_count=document.word_count,
        page_count=document.page_count,
        content_vector=document.vector_embedding or [],
    )


class DocumentService:
    """
    Document service orchestrator.

    Handles document lifecycle: ingestion, listing, search, deletion.
    Commits at the points the ingestion and deletion flows define.
    """

    def __init__(
        self,
        db: AsyncSession,
        storage: S3DocumentClient,
        analyzer: TextractDocumentClient,
        embeddings: EmbeddingClient,
        search_index: HybridSearchIndex,
        retrieval: RetrievalService | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document persistence
            storage: Raw document storage client
            analyzer: OCR client
            embeddings: Embedding client
            search_index: Hybrid search index client
            retrieval: Retrieval service for search (built from the above if None)
        """
        self.db = db
        self._storage = storage
        self._analyzer = analyzer
        self._embeddings = embeddings
        self._search_index = search_index
        self._retrieval = retrieval or RetrievalService(db, embeddings, search_index)

    async def process(self, incoming: IncomingFile) -> DocumentModel:
        """
        Ingest an uploaded file.

        Steps:
        1. Store raw bytes under a unique key
        2. Extract text and page count (OCR)
        3. Count words
        4. Embed the text
        5. Persist the document as PENDING and commit
        6. Push to the search index and mark INDEXED

        If step 6 fails the committed document is marked FAILED so
        reindex_failed() can retry it later.

        Args:
            incoming: Uploaded file

        Returns:
            DocumentModel: Persisted document

        Raises:
            DocumentProcessingError: If any step fails
        """
        logger.info(
            f"{__name__}:process - START",
            extra={"file_name": incoming.file_name, "size_bytes": incoming.size_bytes},
        )
        try:
            stored = await run_in_threadpool(
                self._storage.upload_document,
                incoming.file_name,
                incoming.data,
                incoming.content_type,
            )
            analysis = await self._analyzer.analyze(stored)
            # Blank OCR output still needs a vector for the index entry
            vector = await self._embeddings.embed_document(
                analysis.text if analysis.text.strip() else incoming.file_name
            )

            document = await document_crud.create(
                self.db,
                file_name=incoming.file_name,
                content=analysis.text,
                blob_url=stored.url,
                content_type=incoming.content_type,
                file_size_bytes=incoming.size_bytes,
                page_count=analysis.page_count,
                word_count=count_words(analysis.text),
                vector_embedding=vector,
                index_status=IndexStatus.PENDING,
            )
            await self.db.commit()
        except DocChatException as e:
            await self.db.rollback()
            logger.error(
                f"{__name__}:process - Ingestion failed: {e}",
                extra={"file_name": incoming.file_name},
            )
            raise DocumentProcessingError(
                e.message, file_name=incoming.file_name, details=e.details
            ) from e

        try:
            await self._search_index.push(to_index_entry(document))
        except DocChatException as e:
            document.index_status = IndexStatus.FAILED
            await self.db.commit()
            logger.error(
                f"{__name__}:process - Index push failed, document marked for reindex",
                extra={"document_id": str(document.id)},
            )
            raise DocumentProcessingError(
                e.message,
                document_id=str(document.id),
                file_name=incoming.file_name,
                details=e.details,
            ) from e

        document.index_status = IndexStatus.INDEXED
        await self.db.commit()

        logger.info(
            f"{__name__}:process - COMPLETE",
            extra={
                "document_id": str(document.id),
                "page_count": document.page_count,
                "word_count": document.word_count,
            },
        )
        return document

    async def list_documents(self) -> Sequence[DocumentModel]:
        """All documents, newest upload first."""
        return await document_crud.get_all_recent_first(self.db)

    async def get_document(self, document_id: UUID) -> DocumentModel:
        """
        Fetch one document.

        Raises:
            DocumentNotFoundError: If no such document exists
        """
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        return document

    async def get_documents(self, document_ids: Sequence[UUID]) -> list[DocumentModel]:
        """
        Fetch several documents in the given order.

        Raises:
            DocumentNotFoundError: For the first id with no document
        """
        documents = await document_crud.get_many_in_order(self.db, document_ids)
        found = {doc.id for doc in documents}
        for document_id in document_ids:
            if document_id not in found:
                raise DocumentNotFoundError(str(document_id))
        return documents

    async def search(self, query: str, max_results: int = 5) -> list[DocumentModel]:
        """Hybrid search across all documents, ranked."""
        return await self._retrieval.retrieve(query, max_results=max_results)

    async def delete_document(self, document_id: UUID) -> None:
        """
        Delete a document.

        The search index entry is removed first; if that fails nothing is
        deleted. Chat sessions referencing the document keep existing with
        their document reference cleared.

        Raises:
            DocumentNotFoundError: If no such document exists
            SearchIndexError: If the index entry cannot be removed
        """
        document = await self.get_document(document_id)
        await self._search_index.delete(str(document.id))

        await document_crud.delete_detaching_sessions(self.db, document.id)
        await self.db.commit()
        logger.info(
            f"{__name__}:delete_document - Deleted",
            extra={"document_id": str(document_id)},
        )

    async def reindex_failed(self) -> ReindexOutcome:
        """
        Re-push documents whose index status is FAILED (or stuck PENDING).

        Each document is committed independently; a failure is logged and
        counted, and the document stays FAILED.

        Returns:
            ReindexOutcome: Counts of re-indexed and still-failing documents
        """
        candidates = list(await document_crud.get_by_index_status(self.db, IndexStatus.FAILED))
        candidates += list(await document_crud.get_by_index_status(self.db, IndexStatus.PENDING))

        reindexed = 0
        failed = 0
        for document in candidates:
            if not document.vector_embedding:
                text = document.content if document.content.strip() else document.file_name
                try:
                    document.vector_embedding = await self._embeddings.embed_document(text)
                except DocChatException as e:
                    logger.warning(
                        f"{__name__}:reindex_failed - Embedding failed: {e}",
                        extra={"document_id": str(document.id)},
                    )
                    document.index_status = IndexStatus.FAILED
                    await self.db.commit()
                    failed += 1
                    continue
            try:
                await self._search_index.push(to_index_entry(document))
            except DocChatException as e:
                logger.warning(
                    f"{__name__}:reindex_failed - Push failed: {e}",
                    extra={"document_id": str(document.id)},
                )
                document.index_status = IndexStatus.FAILED
                failed += 1
            else:
                document.index_status = IndexStatus.INDEXED
                reindexed += 1
            await self.db.commit()

        logger.info(
            f"{__name__}:reindex_failed - Done",
            extra={"reindexed": reindexed, "failed": failed},
        )
        return ReindexOutcome(reindexed=reindexed, failed=failed)
