"""
Test suite for ChatService.

Runs chat turns against SQLite with a mocked search index and completion
client; retrieval uses the real RetrievalService.

System role: Verification of chat service orchestration layer
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from docchat.application.services.chat_service import (
    HISTORY_WINDOW,
    ChatService,
    build_completion_messages,
)
from docchat.application.services.retrieval_service import RetrievalService
from docchat.boundary.db.CRUD import chat_message_crud, chat_session_crud
from docchat.boundary.db.models.chat_message_model import ChatMessageModel, MessageRole
from docchat.boundary.vdb.vector_schemas import SearchHit
from docchat.core.exceptions import (
    ChatSessionNotFoundError,
    CompletionError,
    DocumentNotFoundError,
)


async def _message_count(db) -> int:
    result = await db.execute(select(func.count()).select_from(ChatMessageModel))
    return result.scalar_one()


@pytest.fixture
def chat_service(
    test_async_db, mock_embeddings, mock_search_index, mock_completion, template_store
) -> ChatService:
    """Provide ChatService instance with mocked providers."""
    return ChatService(
        db=test_async_db,
        retrieval=RetrievalService(test_async_db, mock_embeddings, mock_search_index),
        completion=mock_completion,
        templates=template_store,
    )


class TestSessions:
    """Session lifecycle."""

    async def test_create_scoped_session(self, chat_service, make_document):
        document = await make_document()

        chat_session = await chat_service.create_session("About it", document.id)

        assert chat_session.title == "About it"
        assert chat_session.document.id == document.id
        assert chat_session.messages == []

    async def test_create_logs_document_only_when_scoped(
        self, chat_service, make_document, caplog
    ):
        document = await make_document()
        caplog.set_level(logging.INFO, logger="docchat.application.services.chat_service")

        await chat_service.create_session("general")
        await chat_service.create_session("scoped", document.id)

        created = [r for r in caplog.records if "create_session - Created" in r.getMessage()]
        assert len(created) == 2
        assert not hasattr(created[0], "document_id")
        assert created[1].document_id == str(document.id)

    async def test_create_with_unknown_document(self, chat_service):
        with pytest.raises(DocumentNotFoundError):
            await chat_service.create_session("x", uuid.uuid4())

    async def test_get_unknown_session(self, chat_service):
        with pytest.raises(ChatSessionNotFoundError):
            await chat_service.get_session(uuid.uuid4())

    async def test_delete_session_removes_messages(self, chat_service, test_async_db):
        chat_session = await chat_service.create_session("general")
        await chat_service.send_message(chat_session.id, "hi")

        await chat_service.delete_session(chat_session.id)

        assert await _message_count(test_async_db) == 0
        with pytest.raises(ChatSessionNotFoundError):
            await chat_service.get_session(chat_session.id)

    async def test_delete_unknown_session(self, chat_service):
        with pytest.raises(ChatSessionNotFoundError):
            await chat_service.delete_session(uuid.uuid4())


class TestSendMessage:
    """One chat turn."""

    async def test_unknown_session_persists_nothing(
        self, chat_service, test_async_db, mock_completion
    ):
        with pytest.raises(ChatSessionNotFoundError):
            await chat_service.send_message(uuid.uuid4(), "hello")

        assert await _message_count(test_async_db) == 0
        mock_completion.complete.assert_not_called()

    async def test_scoped_session_uses_document_without_search(
        self, chat_service, make_document, mock_search_index, mock_completion
    ):
        document = await make_document(file_name="D.pdf")
        chat_session = await chat_service.create_session("scoped", document.id)

        reply = await chat_service.send_message(chat_session.id, "What is this about?")

        mock_search_index.search.assert_not_called()
        assert reply.role == MessageRole.ASSISTANT
        assert reply.content == "Assistant reply"
        assert reply.source_documents == [{"id": str(document.id), "fileName": "D.pdf"}]
        system_prompt = mock_completion.complete.call_args.args[0][0].content
        assert "### Document: D.pdf" in system_prompt

    async def test_unscoped_session_searches_top_three(
        self, chat_service, make_document, mock_search_index
    ):
        document = await make_document()
        mock_search_index.search.return_value = [SearchHit(document_id=str(document.id), score=1.0)]
        chat_session = await chat_service.create_session("general")

        reply = await chat_service.send_message(chat_session.id, "find it")

        assert mock_search_index.search.call_args.kwargs["max_results"] == 3
        assert reply.source_documents == [{"id": str(document.id), "fileName": document.file_name}]

    async def test_no_context_gives_empty_sources(self, chat_service, mock_completion):
        chat_session = await chat_service.create_session("general")

        reply = await chat_service.send_message(chat_session.id, "hello")

        assert reply.source_documents == []
        system_prompt = mock_completion.complete.call_args.args[0][0].content
        assert "No documents are currently available in the context." in system_prompt

    async def test_persists_user_and_assistant_messages(self, chat_service):
        chat_session = await chat_service.create_session("general")

        await chat_service.send_message(chat_session.id, "first question")
        loaded = await chat_service.get_session(chat_session.id)

        assert [(m.role, m.content) for m in loaded.messages] == [
            (MessageRole.USER, "first question"),
            (MessageRole.ASSISTANT, "Assistant reply"),
        ]

    async def test_history_window_bounds_payload(
        self, chat_service, test_async_db, mock_completion
    ):
        chat_session = await chat_service.create_session("long")
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(15):
            await chat_message_crud.create(
                test_async_db,
                chat_session_id=chat_session.id,
                role=MessageRole.USER if i % 2 == 0 else MessageRole.ASSISTANT,
                content=f"m{i}",
                timestamp=base + timedelta(seconds=i),
            )
        await test_async_db.commit()

        await chat_service.send_message(chat_session.id, "latest")

        messages = mock_completion.complete.call_args.args[0]
        assert len(messages) == 12
        assert messages[0].role == "system"
        assert [m.content for m in messages[1:-1]] == [f"m{i}" for i in range(5, 15)]
        assert messages[1].role == "assistant"
        assert (messages[-1].role, messages[-1].content) == ("user", "latest")

    async def test_refreshes_last_updated(self, chat_service, test_async_db):
        chat_session = await chat_service.create_session("general")
        stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
        chat_session.last_updated_at = stale
        await test_async_db.commit()

        await chat_service.send_message(chat_session.id, "hi")
        loaded = await chat_service.get_session(chat_session.id)

        assert loaded.last_updated_at.replace(tzinfo=None) > stale.replace(tzinfo=None)

    async def test_completion_failure_rolls_back_turn(
        self, chat_service, test_async_db, mock_completion
    ):
        chat_session = await chat_service.create_session("general")
        mock_completion.complete.side_effect = CompletionError("provider down")

        with pytest.raises(CompletionError):
            await chat_service.send_message(chat_session.id, "hi")

        assert await _message_count(test_async_db) == 0


class TestBuildCompletionMessages:
    def test_short_history_kept_whole(self):
        history = [
            ChatMessageModel(role=MessageRole.USER, content="q"),
            ChatMessageModel(role=MessageRole.ASSISTANT, content="a"),
        ]

        messages = build_completion_messages("sys", history, "next")

        assert [(m.role, m.content) for m in messages] == [
            ("system", "sys"),
            ("user", "q"),
            ("assistant", "a"),
            ("user", "next"),
        ]

    def test_window_size(self):
        history = [ChatMessageModel(role=MessageRole.USER, content=str(i)) for i in range(30)]

        messages = build_completion_messages("sys", history, "next")

        assert len(messages) == HISTORY_WINDOW + 2
