"""
Chat completion client.

Converts role-tagged messages into LangChain message objects and returns
the text of the model's reply.

Dependencies: langchain_core, langchain_google_genai
System role: Chat completion provider boundary
"""

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from docchat.core.exceptions import CompletionError

logger = logging.getLogger(__name__)

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class CompletionMessage:
    """One entry of a chat completion request."""

    role: Role
    content: str


def to_langchain_messages(messages: Sequence[CompletionMessage]) -> list[BaseMessage]:
    """Map role-tagged messages to LangChain message types."""
    converted: list[BaseMessage] = []
    for message in messages:
        if message.role == "system":
            converted.append(SystemMessage(content=message.content))
        elif message.role == "assistant":
            converted.append(AIMessage(content=message.content))
        else:
            converted.append(HumanMessage(content=message.content))
    return converted


def response_text(content) -> str:
    """
    Flatten a model response's content to text.

    Gemini models may return a list of content parts instead of a string.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content)


class ChatCompletionClient:
    """Async chat completion over a LangChain chat model."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Args:
            model: LangChain chat model (ChatGoogleGenerativeAI in production)
        """
        self._model = model

    async def complete(self, messages: Sequence[CompletionMessage]) -> str:
        """
        Send messages and return the top response text.

        Args:
            messages: Ordered completion messages, system first

        Returns:
            str: Reply text

        Raises:
            CompletionError: If the provider call fails
        """
        try:
            response = await self._model.ainvoke(to_langchain_messages(messages))
        except Exception as e:
            logger.error(
                f"{__name__}:complete - {type(e).__name__}: {e}",
                extra={"message_count": len(messages)},
            )
            raise CompletionError(f"Chat completion failed: {e}", operation="ainvoke") from e

        text = response_text(response.content)
        logger.info(
            f"{__name__}:complete - Received {len(text)} chars",
            extra={"message_count": len(messages)},
        )
        return text
