"""
Chat session ORM model.

Represents one conversation thread, optionally scoped to a single document.

Dependencies: sqlalchemy, docchat.boundary.db.base
System role: Conversation persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docchat.boundary.db.base import Base, UUIDMixin, utc_now


class ChatSessionModel(Base, UUIDMixin):
    """
    Chat session ORM model.

    A session with document_id set is a single-document chat; without it the
    session is "general" and retrieval searches across all documents.
    Deleting the session deletes its messages (cascade).

    Attributes:
        id: UUID primary key (auto-generated)
        title: Display title
        created_at: Creation timestamp (UTC)
        last_updated_at: Refreshed after each completed message round-trip
        document_id: Optional scoped document (SET NULL when it is deleted)

    Relationships:
        document: Scoped DocumentModel, if any
        messages: ChatMessageModel rows ordered by timestamp
    """

    __tablename__ = "chat_sessions"

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )
    last_updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    document_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("documents.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    document = relationship("DocumentModel", back_populates="chat_sessions")
    messages = relationship(
        "ChatMessageModel",
        back_populates="chat_session",
        cascade="all, delete-orphan",
        order_by="ChatMessageModel.timestamp",
        passive_deletes=True,
    )
