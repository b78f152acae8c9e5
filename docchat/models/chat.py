"""
Chat domain models and schemas.

Request/response schemas for chat session and message operations.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from docchat.boundary.db.models.chat_message_model import MessageRole
from docchat.models.document import DocumentSummary


class CreateChatSessionRequest(BaseModel):
    """Request schema for creating a chat session."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=100, description="Session display title")
    document_id: uuid.UUID | None = Field(
        default=None,
        alias="documentId",
        description="Scope the session to a single document",
    )


class SendMessageRequest(BaseModel):
    """Request schema for chat messages."""

    content: str = Field(min_length=1, description="User question or message")


class SourceDocument(BaseModel):
    """Document reference attached to an assistant message."""

    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    file_name: str = Field(alias="fileName")


class ChatMessageResponse(BaseModel):
    """Single chat message in history."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    chat_session_id: uuid.UUID
    role: MessageRole
    content: str
    timestamp: datetime
    source_documents: list[SourceDocument] | None = None


class ChatSessionResponse(BaseModel):
    """Chat session with its optional scoped document summary."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    created_at: datetime
    last_updated_at: datetime
    document_id: uuid.UUID | None = None
    document: DocumentSummary | None = None


class ChatSessionDetailResponse(ChatSessionResponse):
    """Chat session including messages ordered by timestamp."""

    messages: list[ChatMessageResponse] = Field(default_factory=list)
