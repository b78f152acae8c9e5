"""
Chat message ORM model.

One turn in a conversation. Created in user/assistant pairs by the chat
service and never updated afterwards.

Dependencies: sqlalchemy, docchat.boundary.db.base
System role: Conversation history persistence
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docchat.boundary.db.base import Base, UUIDMixin, utc_now


class MessageRole(str, enum.Enum):
    """Closed set of message authors."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessageModel(Base, UUIDMixin):
    """
    Chat message ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        chat_session_id: Owning session (cascade delete)
        role: user or assistant
        content: Message text
        timestamp: Creation time (UTC); defines ordering within a session
        source_documents: JSON list of {"id", "fileName"} for assistant
            messages that used retrieval, None otherwise
    """

    __tablename__ = "chat_messages"

    chat_session_id: Mapped[UUID] = mapped_column(
        ForeignKey("chat_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[MessageRole] = mapped_column(
        Enum(MessageRole, native_enum=False, length=10),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )
    source_documents: Mapped[list[dict] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
    )

    chat_session = relationship("ChatSessionModel", back_populates="messages")
