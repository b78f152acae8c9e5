"""
LLM provider boundary.

Exports: FixedDimensionEmbeddings, EmbeddingClient, ChatCompletionClient,
CompletionMessage
"""

from .chat_client import ChatCompletionClient, CompletionMessage, response_text
from .embedding_client import EmbeddingClient
from .embeddings_wrapper import FixedDimensionEmbeddings

__all__ = [
    "ChatCompletionClient",
    "CompletionMessage",
    "response_text",
    "EmbeddingClient",
    "FixedDimensionEmbeddings",
]
