"""
Chat service for document-grounded conversation.

Orchestrates one chat turn: session load, user message, context retrieval,
system prompt assembly, bounded history, chat completion, and assistant
message persistence with source documents. Also owns session lifecycle
(create, list, get, delete).

Dependencies: docchat.boundary.db, docchat.boundary.llm, docchat.core.prompts,
docchat.application.services.retrieval_service
System role: Chat service orchestration layer
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docchat.application.services.retrieval_service import RetrievalService
from docchat.boundary.db.base import utc_now
from docchat.boundary.db.CRUD.chat_message_crud import chat_message_crud
from docchat.boundary.db.CRUD.chat_session_crud import chat_session_crud
from docchat.boundary.db.CRUD.document_crud import document_crud
from docchat.boundary.db.models.chat_message_model import ChatMessageModel, MessageRole
from docchat.boundary.db.models.chat_session_model import ChatSessionModel
from docchat.boundary.db.models.document_model import DocumentModel
from docchat.boundary.llm.chat_client import ChatCompletionClient, CompletionMessage
from docchat.core.exceptions import ChatSessionNotFoundError, DocumentNotFoundError
from docchat.core.prompts import PromptTemplateStore, build_document_chat_prompt

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 10
UNSCOPED_CONTEXT_LIMIT = 3


def source_references(documents: Sequence[DocumentModel]) -> list[dict]:
    """Serialized {"id", "fileName"} references stored on assistant messages."""
    return [{"id": str(doc.id), "fileName": doc.file_name} for doc in documents]


def build_completion_messages(
    system_prompt: str,
    history: Sequence[ChatMessageModel],
    user_text: str,
) -> list[CompletionMessage]:
    """
    Assemble the completion request.

    One system message, then the last HISTORY_WINDOW prior messages in
    chronological order, then the new user message.
    """
    messages = [CompletionMessage(role="system", content=system_prompt)]
    for message in list(history)[-HISTORY_WINDOW:]:
        messages.append(CompletionMessage(role=message.role.value, content=message.content))
    messages.append(CompletionMessage(role="user", content=user_text))
    return messages


class ChatService:
    """
    Chat service for document-grounded conversation.

    A turn is committed as a whole: if any step fails the transaction is
    rolled back and neither message is persisted.
    """

    def __init__(
        self,
        db: AsyncSession,
        retrieval: RetrievalService,
        completion: ChatCompletionClient,
        templates: PromptTemplateStore,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for database operations
            retrieval: Context retrieval service
            completion: Chat completion client
            templates: Prompt template store
        """
        self.db = db
        self._retrieval = retrieval
        self._completion = completion
        self._templates = templates

    async def create_session(
        self,
        title: str,
        document_id: UUID | None = None,
    ) -> ChatSessionModel:
        """
        Create a chat session, optionally scoped to one document.

        Raises:
            DocumentNotFoundError: If document_id does not reference a document
        """
        if document_id is not None and not await document_crud.exists(self.db, document_id):
            raise DocumentNotFoundError(str(document_id))

        chat_session = await chat_session_crud.create(
            self.db,
            title=title,
            document_id=document_id,
        )
        await self.db.commit()
        extra = {"session_id": str(chat_session.id)}
        if document_id is not None:
            extra["document_id"] = str(document_id)
        logger.info(f"{__name__}:create_session - Created", extra=extra)
        return await self.get_session(chat_session.id)

    async def list_sessions(self) -> Sequence[ChatSessionModel]:
        """Sessions ordered by last update, newest first."""
        return await chat_session_crud.get_all_recently_updated(self.db)

    async def get_session(self, session_id: UUID) -> ChatSessionModel:
        """
        Fetch a session with its document and ordered messages.

        Raises:
            ChatSessionNotFoundError: If no such session exists
        """
        chat_session = await chat_session_crud.get_with_history(self.db, session_id)
        if chat_session is None:
            raise ChatSessionNotFoundError(str(session_id))
        return chat_session

    async def delete_session(self, session_id: UUID) -> None:
        """
        Delete a session and its messages.

        Raises:
            ChatSessionNotFoundError: If no such session exists
        """
        deleted = await chat_session_crud.delete_with_messages(self.db, session_id)
        if not deleted:
            await self.db.rollback()
            raise ChatSessionNotFoundError(str(session_id))
        await self.db.commit()
        logger.info(f"{__name__}:delete_session - Deleted", extra={"session_id": str(session_id)})

    async def send_message(self, session_id: UUID, user_text: str) -> ChatMessageModel:
        """
        Run one chat turn.

        Flow:
        1. Load session with document and messages
        2. Record user message
        3. Retrieve context (scoped document, or top 3 search hits)
        4. Build system prompt from context
        5. Assemble system + last 10 messages + user message
        6. Chat completion
        7. Record assistant message with source documents
        8. Refresh session last_updated_at and commit

        Args:
            session_id: Chat session UUID
            user_text: User message content

        Returns:
            ChatMessageModel: Persisted assistant message

        Raises:
            ChatSessionNotFoundError: If session doesn't exist (nothing persisted)
        """
        chat_session = await self.get_session(session_id)
        history = list(chat_session.messages)

        try:
            await chat_message_crud.add_message(
                self.db,
                chat_session_id=chat_session.id,
                role=MessageRole.USER,
                content=user_text,
            )

            if chat_session.document_id is not None:
                context = await self._retrieval.retrieve(
                    user_text, scoped_document_id=chat_session.document_id
                )
            else:
                context = await self._retrieval.retrieve(
                    user_text, max_results=UNSCOPED_CONTEXT_LIMIT
                )

            system_prompt = build_document_chat_prompt(self._templates, context)
            messages = build_completion_messages(system_prompt, history, user_text)
            logger.info(
                f"{__name__}:send_message - Requesting completion",
                extra={
                    "session_id": str(session_id),
                    "context_documents": len(context),
                    "message_count": len(messages),
                },
            )
            reply = await self._completion.complete(messages)

            assistant_message = await chat_message_crud.add_message(
                self.db,
                chat_session_id=chat_session.id,
                role=MessageRole.ASSISTANT,
                content=reply,
                source_documents=source_references(context),
            )
            chat_session.last_updated_at = utc_now()
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"{__name__}:send_message - COMPLETE",
            extra={"session_id": str(session_id), "message_id": str(assistant_message.id)},
        )
        return assistant_message
