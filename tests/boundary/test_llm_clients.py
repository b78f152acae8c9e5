"""
Test suite for the chat completion and embedding clients.

System role: Verification of LLM provider boundary mapping
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from docchat.boundary.llm.chat_client import (
    ChatCompletionClient,
    CompletionMessage,
    response_text,
    to_langchain_messages,
)
from docchat.boundary.llm.embedding_client import EmbeddingClient
from docchat.core.exceptions import CompletionError, EmbeddingError


class TestResponseText:
    @pytest.mark.parametrize(
        "content, expected",
        [
            ("plain", "plain"),
            (["a", {"type": "text", "text": "b"}], "ab"),
            ([{"type": "image_url", "image_url": "x"}, {"text": "c"}], "c"),
        ],
    )
    def test_flattens_content(self, content, expected):
        assert response_text(content) == expected


class TestChatCompletionClient:
    def test_message_mapping(self):
        converted = to_langchain_messages(
            [
                CompletionMessage("system", "s"),
                CompletionMessage("user", "u"),
                CompletionMessage("assistant", "a"),
            ]
        )
        assert [type(m) for m in converted] == [SystemMessage, HumanMessage, AIMessage]
        assert [m.content for m in converted] == ["s", "u", "a"]

    async def test_complete_returns_text(self):
        model = MagicMock()
        model.ainvoke = AsyncMock(return_value=AIMessage(content="hi there"))
        client = ChatCompletionClient(model)

        text = await client.complete([CompletionMessage("user", "hello")])

        assert text == "hi there"
        sent = model.ainvoke.call_args.args[0]
        assert isinstance(sent[0], HumanMessage)

    async def test_provider_error_wrapped(self):
        model = MagicMock()
        model.ainvoke = AsyncMock(side_effect=RuntimeError("quota"))

        with pytest.raises(CompletionError, match="quota"):
            await ChatCompletionClient(model).complete([CompletionMessage("user", "x")])


class TestEmbeddingClient:
    async def test_embed_document(self):
        embeddings = MagicMock()
        embeddings.embed_documents.return_value = [[1.0, 2.0]]

        vector = await EmbeddingClient(embeddings).embed_document("text")

        assert vector == [1.0, 2.0]
        embeddings.embed_documents.assert_called_once_with(["text"])

    async def test_embed_query(self):
        embeddings = MagicMock()
        embeddings.embed_query.return_value = [3.0]

        assert await EmbeddingClient(embeddings).embed_query("q") == [3.0]

    async def test_provider_error_wrapped(self):
        embeddings = MagicMock()
        embeddings.embed_documents.side_effect = RuntimeError("bad key")

        with pytest.raises(EmbeddingError):
            await EmbeddingClient(embeddings).embed_document("text")

    async def test_empty_response_raises(self):
        embeddings = MagicMock()
        embeddings.embed_documents.return_value = []

        with pytest.raises(EmbeddingError):
            await EmbeddingClient(embeddings).embed_document("text")
