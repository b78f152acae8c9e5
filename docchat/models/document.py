"""
Document domain models and schemas.

Request/response schemas for document operations.

Dependencies: pydantic
System role: Document API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from docchat.boundary.db.models.document_model import IndexStatus

PREVIEW_LENGTH = 200


def content_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """First ``length`` characters, with an ellipsis when truncated."""
    if len(content) > length:
        return content[:length] + "..."
    return content


class DocumentSummary(BaseModel):
    """Document listing entry (no content or embedding)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    file_name: str
    uploaded_at: datetime
    content_type: str
    file_size_bytes: int
    page_count: int
    word_count: int


class DocumentSearchResult(DocumentSummary):
    """Search hit with a short content preview."""

    content_preview: str


class DocumentResponse(DocumentSummary):
    """Full document representation."""

    content: str
    blob_url: str
    index_status: IndexStatus
    vector_embedding: list[float] | None = Field(default=None, exclude=True)

    @computed_field
    @property
    def has_embedding(self) -> bool:
        return self.vector_embedding is not None


class DeleteDocumentResponse(BaseModel):
    """Confirmation for document deletion."""

    id: uuid.UUID
    message: str = "Document deleted successfully"


class ReindexResponse(BaseModel):
    """Outcome of re-pushing documents whose indexing failed."""

    reindexed: int = Field(description="Documents successfully pushed to the search index")
    failed: int = Field(description="Documents that failed again")
