"""
Search index boundary layer.

Provides the hybrid search index client used for document ingestion,
retrieval, and deletion.
- HybridSearchIndex: S3 Vectors kNN with lexical re-ranking

Dependencies: boto3, tenacity
System role: Search index adapter for retrieval
"""

from docchat.boundary.vdb.search_index import HybridSearchIndex, reciprocal_rank_fusion
from docchat.boundary.vdb.vector_schemas import SearchHit, SearchIndexEntry

__all__ = [
    "HybridSearchIndex",
    "reciprocal_rank_fusion",
    "SearchHit",
    "SearchIndexEntry",
]
