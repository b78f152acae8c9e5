"""
Hybrid document search index on Amazon S3 Vectors.

Each document is stored as one vector keyed by its ID, with file name,
truncated content, and counts as metadata. Queries run a vector kNN and
re-rank the candidates by fusing vector rank with a lexical term-match
rank (reciprocal rank fusion).

Dependencies: boto3, tenacity, fastapi (run_in_threadpool)
System role: Search index boundary for ingestion, retrieval and deletion
"""

import json
import logging
import re
from typing import Any, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from docchat.boundary.vdb.vector_schemas import SearchHit, SearchIndexEntry
from docchat.core.exceptions import SearchIndexError

logger = logging.getLogger(__name__)

RRF_K = 60
# S3 Vectors limit on the filterable part of a vector's metadata
FILTERABLE_METADATA_MAX_BYTES = 2048
TRANSIENT_ERROR_CODES = frozenset(
    {
        "ThrottlingException",
        "TooManyRequestsException",
        "ServiceUnavailableException",
        "InternalServerException",
        "RequestTimeout",
    }
)
_TOKEN_RE = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str) -> list[str]:
    """Lower-cased word tokens."""
    return _TOKEN_RE.findall(text.lower())


def lexical_score(query_terms: set[str], text: str) -> int:
    """Number of distinct query terms present in text."""
    if not query_terms:
        return 0
    return len(query_terms & set(tokenize(text)))


def reciprocal_rank_fusion(rankings: Sequence[Sequence[str]], k: int = RRF_K) -> list[tuple[str, float]]:
    """
    Fuse several rankings of keys into one.

    Each ranking contributes 1 / (k + rank) per key (rank is 1-based).
    Ties keep the order in which keys were first seen.

    Returns:
        list[tuple[str, float]]: (key, fused score), best first
    """
    scores: dict[str, float] = {}
    for ranking in rankings:
        for rank, key in enumerate(ranking, start=1):
            scores[key] = scores.get(key, 0.0) + 1.0 / (k + rank)
    return sorted(scores.items(), key=lambda item: item[1], reverse=True)


def truncate_utf8(text: str, max_bytes: int) -> str:
    """Longest prefix of text whose UTF-8 encoding fits in max_bytes."""
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[: max(max_bytes, 0)].decode("utf-8", errors="ignore")


def metadata_size(metadata: dict[str, Any]) -> int:
    """Encoded size of a metadata document in bytes."""
    return len(json.dumps(metadata, ensure_ascii=False).encode("utf-8"))


def _is_transient(error: BaseException) -> bool:
    if not isinstance(error, ClientError):
        return False
    code = error.response.get("Error", {}).get("Code", "")
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0)
    return code in TRANSIENT_ERROR_CODES or status >= 500


_retry_on_client_error = retry(
    retry=retry_if_exception(_is_transient),
    stop=stop_after_attempt(3),
    wait=wait_exponential_jitter(initial=1, max=10, jitter=2),
    before_sleep=lambda retry_state: logger.warning(
        f"{__name__} - Retry {retry_state.attempt_number}/3 after "
        f"{type(retry_state.outcome.exception()).__name__}"
    ),
    reraise=True,
)


class HybridSearchIndex:
    """
    S3 Vectors document index with hybrid ranking.

    Wraps the boto3 ``s3vectors`` client. Sync SDK calls run in the
    thread pool; throttling and 5xx ClientErrors are retried before
    surfacing as SearchIndexError.

    Metadata keys written per vector: fileName, content, uploadedAt,
    wordCount, pageCount. Unless the index was created with ``content``
    in ``nonFilterableMetadataKeys``, the whole metadata document is kept
    within FILTERABLE_METADATA_MAX_BYTES by shortening content.
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        max_metadata_content_bytes: int = 4000,
        content_non_filterable: bool = False,
        client=None,
    ) -> None:
        """
        Initialize the search index client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region for S3 Vectors
            endpoint_url: Optional custom endpoint
            max_metadata_content_bytes: UTF-8 byte cap on stored content
            content_non_filterable: Index declares ``content`` non-filterable
            client: Pre-built boto3 s3vectors client (tests)
        """
        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self._max_content_bytes = max_metadata_content_bytes
        self._content_non_filterable = content_non_filterable
        self._client = client or boto3.client(
            "s3vectors", region_name=region, endpoint_url=endpoint_url
        )

    def _metadata(self, entry: SearchIndexEntry) -> dict[str, Any]:
        metadata = {
            "fileName": entry.file_name,
            "content": "",
            "uploadedAt": entry.uploaded_at.isoformat(),
            "wordCount": entry.word_count,
            "pageCount": entry.page_count,
        }
        if self._content_non_filterable:
            metadata["content"] = truncate_utf8(entry.content, self._max_content_bytes)
            return metadata

        budget = min(
            self._max_content_bytes,
            FILTERABLE_METADATA_MAX_BYTES - metadata_size(metadata),
        )
        content = truncate_utf8(entry.content, budget)
        metadata["content"] = content
        # JSON escapes can still push the encoded size over the limit
        while content and metadata_size(metadata) > FILTERABLE_METADATA_MAX_BYTES:
            overflow = metadata_size(metadata) - FILTERABLE_METADATA_MAX_BYTES
            content = truncate_utf8(content, len(content.encode("utf-8")) - overflow)
            metadata["content"] = content
        return metadata

    @_retry_on_client_error
    def _put(self, entry: SearchIndexEntry) -> None:
        self._client.put_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=self._index_name,
            vectors=[
                {
                    "key": str(entry.id),
                    "data": {"float32": [float(v) for v in entry.content_vector]},
                    "metadata": self._metadata(entry),
                }
            ],
        )

    @_retry_on_client_error
    def _query(self, vector: list[float], top_k: int) -> list[dict]:
        response = self._client.query_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=self._index_name,
            queryVector={"float32": [float(v) for v in vector]},
            topK=top_k,
            returnMetadata=True,
            returnDistance=True,
        )
        return response.get("vectors", [])

    @_retry_on_client_error
    def _delete(self, keys: list[str]) -> None:
        self._client.delete_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=self._index_name,
            keys=keys,
        )

    async def push(self, entry: SearchIndexEntry) -> None:
        """
        Insert or overwrite a document entry.

        Raises:
            SearchIndexError: If the write fails after retries
        """
        try:
            await run_in_threadpool(self._put, entry)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                f"{__name__}:push - {type(e).__name__}: {e}",
                extra={"document_id": str(entry.id)},
            )
            raise SearchIndexError(
                f"Failed to index document: {e}",
                operation="put_vectors",
                details={"document_id": str(entry.id)},
            ) from e
        logger.info(f"{__name__}:push - Indexed document", extra={"document_id": str(entry.id)})

    async def search(
        self,
        query: str,
        query_vector: list[float],
        max_results: int = 5,
    ) -> list[SearchHit]:
        """
        Hybrid search over indexed documents.

        Args:
            query: Raw query text for lexical ranking
            query_vector: Embedding of the query for kNN
            max_results: Number of candidates (topK) and maximum hits

        Returns:
            list[SearchHit]: Hits in fused rank order, best first

        Raises:
            SearchIndexError: If the query fails after retries
        """
        try:
            candidates = await run_in_threadpool(self._query, query_vector, max_results)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:search - {type(e).__name__}: {e}")
            raise SearchIndexError(
                f"Search request failed: {e}", operation="query_vectors"
            ) from e

        if not candidates:
            return []

        by_key = {candidate["key"]: candidate for candidate in candidates}
        vector_ranking = [candidate["key"] for candidate in candidates]

        terms = set(tokenize(query))
        lexical_scores = {
            key: lexical_score(
                terms,
                f"{c.get('metadata', {}).get('fileName', '')} {c.get('metadata', {}).get('content', '')}",
            )
            for key, c in by_key.items()
        }
        # stable sort keeps vector order among equal lexical scores
        lexical_ranking = sorted(
            (key for key in vector_ranking if lexical_scores[key] > 0),
            key=lambda key: lexical_scores[key],
            reverse=True,
        )

        fused = reciprocal_rank_fusion([vector_ranking, lexical_ranking])
        hits = [
            SearchHit(
                document_id=key,
                file_name=by_key[key].get("metadata", {}).get("fileName", ""),
                score=score,
                distance=by_key[key].get("distance"),
            )
            for key, score in fused[:max_results]
        ]

        logger.info(
            f"{__name__}:search - Found {len(hits)} results",
            extra={"max_results": max_results, "lexical_matches": len(lexical_ranking)},
        )
        return hits

    async def delete(self, document_id: str) -> None:
        """
        Remove a document entry. Deleting an absent key is not an error.

        Raises:
            SearchIndexError: If the delete fails after retries
        """
        try:
            await run_in_threadpool(self._delete, [document_id])
        except (ClientError, BotoCoreError) as e:
            logger.error(
                f"{__name__}:delete - {type(e).__name__}: {e}",
                extra={"document_id": document_id},
            )
            raise SearchIndexError(
                f"Failed to remove document from index: {e}",
                operation="delete_vectors",
                details={"document_id": document_id},
            ) from e
        logger.info(f"{__name__}:delete - Removed document", extra={"document_id": document_id})
