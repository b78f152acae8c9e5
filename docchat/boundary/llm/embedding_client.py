"""
Embedding client.

Async facade over the sync LangChain embeddings model. Document text and
search queries are embedded with their respective task types so both land
in the same vector space.

Dependencies: langchain_core, fastapi (run_in_threadpool)
System role: Embedding provider boundary for ingestion and retrieval
"""

import logging

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings

from docchat.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Generates fixed-dimension vectors for documents and queries."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Args:
            embeddings: LangChain embeddings model (usually FixedDimensionEmbeddings)
        """
        self._embeddings = embeddings

    async def embed_document(self, text: str) -> list[float]:
        """
        Embed full document text.

        Raises:
            EmbeddingError: If the provider call fails
        """
        try:
            vectors = await run_in_threadpool(self._embeddings.embed_documents, [text])
        except Exception as e:
            logger.error(f"{__name__}:embed_document - {type(e).__name__}: {e}")
            raise EmbeddingError(
                f"Failed to embed document: {e}", operation="embed_documents"
            ) from e
        if not vectors:
            raise EmbeddingError("Embedding provider returned no vector", operation="embed_documents")
        return list(vectors[0])

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a search query.

        Raises:
            EmbeddingError: If the provider call fails
        """
        try:
            vector = await run_in_threadpool(self._embeddings.embed_query, text)
        except Exception as e:
            logger.error(f"{__name__}:embed_query - {type(e).__name__}: {e}")
            raise EmbeddingError(
                f"Failed to embed query: {e}", operation="embed_query"
            ) from e
        return list(vector)
