"""
Document ORM model.

Represents one ingested file: extracted text, storage reference, derived
counts, embedding, and search-index synchronisation state.

Dependencies: sqlalchemy, docchat.boundary.db.base
System role: Document persistence for ingestion and retrieval
"""

import enum
from datetime import datetime

from sqlalchemy import JSON, BigInteger, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docchat.boundary.db.base import Base, UUIDMixin, utc_now


class IndexStatus(str, enum.Enum):
    """
    Search index synchronisation states.

    PENDING: Row persisted, search index push not yet confirmed
    INDEXED: Search index holds a matching entry
    FAILED: Index push failed; eligible for lazy re-indexing
    """

    PENDING = "pending"
    INDEXED = "indexed"
    FAILED = "failed"


class DocumentModel(Base, UUIDMixin):
    """
    Document ORM model.

    Lifecycle: created once per successful OCR + embedding run, then pushed
    to the search index. word_count is always derived from content during
    ingestion. Deleting a document clears document_id on any chat session
    that referenced it (ON DELETE SET NULL); sessions survive.

    Attributes:
        id: UUID primary key (auto-generated)
        file_name: Original uploaded file name
        content: Full extracted text
        blob_url: Durable storage reference for the raw bytes
        uploaded_at: Ingestion timestamp (UTC)
        content_type: Declared MIME type of the upload
        file_size_bytes: Size of the raw upload
        page_count: Pages reported by OCR
        word_count: Whitespace-delimited token count of content
        vector_embedding: JSON array of floats, nullable
        index_status: Search index synchronisation state

    Relationships:
        chat_sessions: Sessions scoped to this document
    """

    __tablename__ = "documents"

    file_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    blob_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )
    content_type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    file_size_bytes: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    page_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    vector_embedding: Mapped[list[float] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
        doc="Embedding vector of the extracted content",
    )
    index_status: Mapped[IndexStatus] = mapped_column(
        Enum(IndexStatus, native_enum=False),
        nullable=False,
        default=IndexStatus.PENDING,
    )

    chat_sessions = relationship(
        "ChatSessionModel",
        back_populates="document",
        passive_deletes=True,
    )
