"""
Composite prompt builders.

Serialize Document records into bounded text blocks and render them through
a PromptTemplateStore. Length bounds are character counts, not tokens.

Dependencies: docchat.core.prompts.template_store
System role: System/user prompt assembly for chat and analysis flows
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from docchat.core.prompts.template_store import PromptTemplateStore

if TYPE_CHECKING:
    from docchat.boundary.db.models.document_model import DocumentModel

DOCUMENT_CHAT_CONTENT_LIMIT = 3000
COMPARISON_CONTENT_LIMIT = 2000

CHAT_TRUNCATION_MARKER = "...[Content truncated]"
COMPARISON_TRUNCATION_MARKER = "..."
EMPTY_CONTEXT_TEXT = "No documents are currently available in the context."


def _truncate(content: str, limit: int, marker: str) -> str:
    if len(content) > limit:
        return content[:limit] + marker
    return content


def format_document_context(documents: Sequence["DocumentModel"]) -> str:
    """
    Build the context block used by the document chat system prompt.

    Args:
        documents: Documents retrieved for the current turn

    Returns:
        str: Markdown block with one section per document
    """
    if not documents:
        return EMPTY_CONTEXT_TEXT + "\n"

    lines = ["## Available Documents:"]
    for doc in documents:
        content = _truncate(doc.content or "", DOCUMENT_CHAT_CONTENT_LIMIT, CHAT_TRUNCATION_MARKER)
        lines.append(f"\n### Document: {doc.file_name}")
        lines.append(f"**Upload Date:** {doc.uploaded_at:%Y-%m-%d}")
        lines.append(f"**Pages:** {doc.page_count} | **Words:** {doc.word_count}")
        lines.append(f"**Content:**\n{content}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_comparison_block(documents: Sequence["DocumentModel"]) -> str:
    """Number each document and append its (truncated) content."""
    lines: list[str] = []
    for index, doc in enumerate(documents, start=1):
        content = _truncate(doc.content or "", COMPARISON_CONTENT_LIMIT, COMPARISON_TRUNCATION_MARKER)
        lines.append(f"\n## Document {index}: {doc.file_name}")
        lines.append(content)
        lines.append("")
    return "\n".join(lines) + "\n"


def build_document_chat_prompt(
    store: PromptTemplateStore,
    context_documents: Sequence["DocumentModel"],
    specific_focus: str | None = None,
) -> str:
    """
    Render the document chat system prompt.

    Args:
        store: Template store
        context_documents: Documents to place in {CONTEXT}
        specific_focus: Optional value for a {FOCUS} token

    Returns:
        str: Rendered system prompt
    """
    params = {"CONTEXT": format_document_context(context_documents)}
    if specific_focus:
        params["FOCUS"] = specific_focus
    return store.get("document_chat_system", params)


def build_comparison_prompt(
    store: PromptTemplateStore,
    documents: Sequence["DocumentModel"],
    comparison_focus: str = "general analysis",
) -> str:
    """Render the multi-document comparison prompt."""
    return store.get(
        "document_comparison",
        {
            "DOCUMENT_LIST": format_comparison_block(documents),
            "COMPARISON_FOCUS": comparison_focus,
        },
    )


def build_search_enhancement_prompt(store: PromptTemplateStore, user_query: str) -> str:
    """Render the search query enhancement prompt."""
    return store.get("search_enhancement", {"USER_QUERY": user_query})


def build_context_validation_prompt(
    store: PromptTemplateStore,
    user_question: str,
    context: str,
) -> str:
    """Render the context relevance rating prompt."""
    return store.get(
        "context_validation",
        {"USER_QUESTION": user_question, "CONTEXT": context},
    )
