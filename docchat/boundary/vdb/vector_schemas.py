"""
Search index schemas.

Pydantic models for the document entries pushed to the hybrid search
index and the ranked hits it returns.

Dependencies: pydantic
System role: Type definitions for search index operations
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class SearchIndexEntry(BaseModel):
    """
    One document as stored in the search index.

    Field aliases are the metadata keys written next to each vector.
    """

    id: UUID = Field(description="Document ID, used as the vector key")
    file_name: str = Field(alias="fileName")
    content: str = Field(description="Extracted text (truncated when stored as metadata)")
    uploaded_at: datetime = Field(alias="uploadedAt")
    word_count: int = Field(alias="wordCount", ge=0)
    page_count: int = Field(alias="pageCount", ge=0)
    content_vector: list[float] = Field(alias="contentVector")

    model_config = {"populate_by_name": True}


class SearchHit(BaseModel):
    """Single ranked result from hybrid search."""

    document_id: str = Field(description="Document ID as stored in the index")
    file_name: str = Field(default="")
    score: float = Field(description="Fused reciprocal-rank score (higher is better)")
    distance: float | None = Field(default=None, description="Vector distance, if returned")
