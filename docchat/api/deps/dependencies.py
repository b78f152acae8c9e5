"""
Dependency injection container.

Factory functions for FastAPI dependencies. Provider clients and the
prompt template store are process-wide and cached in ServiceCache;
services are built per request around the request's database session.

Dependencies: docchat.configs, docchat.application, docchat.boundary, docchat.core.prompts
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docchat.application.services import ChatService, DocumentService, RetrievalService
from docchat.boundary.aws import S3DocumentClient, TextractDocumentClient
from docchat.boundary.db import get_async_db
from docchat.boundary.llm import ChatCompletionClient, EmbeddingClient
from docchat.boundary.vdb import HybridSearchIndex
from docchat.configs import get_settings
from docchat.core.prompts import PromptTemplateStore


class ServiceCache:
    """Container for cached provider clients and the template store."""

    def __init__(self):
        self._template_store = None
        self._s3_client = None
        self._textract_client = None
        self._embedding_client = None
        self._completion_client = None
        self._search_index = None

    @property
    def template_store(self) -> PromptTemplateStore:
        """Process-wide prompt template store (in-memory, lock-guarded)."""
        if self._template_store is None:
            self._template_store = PromptTemplateStore()
        return self._template_store

    @property
    def s3_client(self) -> S3DocumentClient:
        """Get cached S3 document client."""
        if self._s3_client is None:
            storage = get_settings().storage
            self._s3_client = S3DocumentClient(
                bucket=storage.bucket,
                region=storage.region,
                endpoint_url=storage.endpoint_url,
            )
        return self._s3_client

    @property
    def textract_client(self) -> TextractDocumentClient:
        """Get cached Textract client."""
        if self._textract_client is None:
            analysis = get_settings().document_analysis
            self._textract_client = TextractDocumentClient(
                region=analysis.region,
                endpoint_url=analysis.endpoint_url,
                poll_interval_seconds=analysis.poll_interval_seconds,
                timeout_seconds=analysis.timeout_seconds,
            )
        return self._textract_client

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            from docchat.boundary.llm import FixedDimensionEmbeddings

            llm = get_settings().llm
            self._embedding_client = EmbeddingClient(
                FixedDimensionEmbeddings(
                    model=llm.embedding_model,
                    output_dimensionality=llm.embedding_dimension,
                    google_api_key=llm.google_api_key,
                )
            )
        return self._embedding_client

    @property
    def completion_client(self) -> ChatCompletionClient:
        """Get cached chat completion client."""
        if self._completion_client is None:
            from langchain_google_genai import ChatGoogleGenerativeAI

            llm = get_settings().llm
            self._completion_client = ChatCompletionClient(
                ChatGoogleGenerativeAI(
                    model=llm.chat_model,
                    temperature=llm.temperature,
                    google_api_key=llm.google_api_key,
                )
            )
        return self._completion_client

    @property
    def search_index(self) -> HybridSearchIndex:
        """Get cached search index client."""
        if self._search_index is None:
            search = get_settings().search
            self._search_index = HybridSearchIndex(
                vectors_bucket=search.vectors_bucket,
                index_name=search.index_name,
                region=search.region,
                endpoint_url=search.endpoint_url,
                max_metadata_content_bytes=search.max_metadata_content_bytes,
                content_non_filterable=search.content_non_filterable,
            )
        return self._search_index

    def clear(self) -> None:
        """Clear all cached instances."""
        self._template_store = None
        self._s3_client = None
        self._textract_client = None
        self._embedding_client = None
        self._completion_client = None
        self._search_index = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_template_store() -> PromptTemplateStore:
    """Get the process-wide prompt template store."""
    return get_service_cache().template_store


def get_completion_client() -> ChatCompletionClient:
    """Get the cached chat completion client."""
    return get_service_cache().completion_client


def get_retrieval_service(db: AsyncSession = Depends(get_async_db)) -> RetrievalService:
    """
    Get retrieval service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        RetrievalService: Retrieval over the cached embedding/search clients
    """
    cache = get_service_cache()
    return RetrievalService(db, cache.embedding_client, cache.search_index)


def get_document_service(db: AsyncSession = Depends(get_async_db)) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DocumentService: Document service wired to the cached provider clients
    """
    cache = get_service_cache()
    return DocumentService(
        db=db,
        storage=cache.s3_client,
        analyzer=cache.textract_client,
        embeddings=cache.embedding_client,
        search_index=cache.search_index,
    )


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    retrieval: RetrievalService = Depends(get_retrieval_service),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        retrieval: Retrieval service sharing the same session

    Returns:
        ChatService: Chat service instance
    """
    cache = get_service_cache()
    return ChatService(
        db=db,
        retrieval=retrieval,
        completion=cache.completion_client,
        templates=cache.template_store,
    )
