"""
Document analysis functions.

Single-shot prompts over the completion provider: summarization,
comparison, query enhancement and classification, context relevance
scoring, and key phrase extraction. Each function takes the template
store and the completion client explicitly and holds no state.

Dependencies: docchat.core.prompts, docchat.boundary.llm
System role: Extended document/query analysis on top of chat completion
"""

import logging
import re
from typing import Sequence

from docchat.boundary.db.models.document_model import DocumentModel
from docchat.boundary.llm.chat_client import ChatCompletionClient, CompletionMessage
from docchat.core.exceptions import ValidationError
from docchat.core.prompts import (
    PromptTemplateStore,
    build_comparison_prompt,
    build_context_validation_prompt,
    build_search_enhancement_prompt,
)

logger = logging.getLogger(__name__)

QUERY_CATEGORIES = ("FACTUAL", "SUMMARY", "COMPARISON", "ANALYSIS", "SEARCH", "GENERAL")
DEFAULT_QUERY_CATEGORY = "GENERAL"

DEFAULT_RELEVANCE_SCORE = 3
UNPARSABLE_RELEVANCE_EXPLANATION = "Could not parse relevance assessment"
MISSING_RELEVANCE_EXPLANATION = "No explanation provided"

_LIST_PREFIX_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


async def _ask(completion: ChatCompletionClient, system: str, prompt: str) -> str:
    return await completion.complete(
        [
            CompletionMessage(role="system", content=system),
            CompletionMessage(role="user", content=prompt),
        ]
    )


async def summarize_document(
    store: PromptTemplateStore,
    completion: ChatCompletionClient,
    document: DocumentModel,
) -> str:
    """Summarize one document with the ``document_summary`` template."""
    prompt = store.get(
        "document_summary",
        {"DOCUMENT_NAME": document.file_name, "DOCUMENT_CONTENT": document.content},
    )
    logger.info(
        f"{__name__}:summarize_document - Summarizing",
        extra={"document_id": str(document.id)},
    )
    return await _ask(completion, "You are a document analysis expert.", prompt)


async def compare_documents(
    store: PromptTemplateStore,
    completion: ChatCompletionClient,
    documents: Sequence[DocumentModel],
    focus: str | None = None,
) -> str:
    """
    Compare two or more documents.

    Args:
        store: Template store
        completion: Chat completion client
        documents: Documents to compare, in presentation order
        focus: Comparison focus; defaults to "general analysis"

    Returns:
        str: Comparison text

    Raises:
        ValidationError: If fewer than two documents are given
    """
    if len(documents) < 2:
        raise ValidationError(
            "At least 2 documents required for comparison",
            field="document_ids",
            details={"count": len(documents)},
        )
    prompt = build_comparison_prompt(store, documents, focus or "general analysis")
    return await _ask(completion, "You are a document comparison specialist.", prompt)


async def enhance_search_query(
    store: PromptTemplateStore,
    completion: ChatCompletionClient,
    query: str,
) -> list[str]:
    """
    Ask for alternative search terms.

    Returns:
        list[str]: One term per non-empty response line, list markers removed
    """
    prompt = build_search_enhancement_prompt(store, query)
    text = await _ask(completion, "You are a search optimization expert.", prompt)
    terms = []
    for line in text.splitlines():
        term = _LIST_PREFIX_RE.sub("", line).strip()
        if term:
            terms.append(term)
    return terms


def parse_relevance(text: str) -> tuple[int, str]:
    """
    Parse a relevance rating response.

    The first non-empty line must be an integer score; the remaining lines
    are joined with spaces as the explanation.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return DEFAULT_RELEVANCE_SCORE, UNPARSABLE_RELEVANCE_EXPLANATION
    try:
        score = int(lines[0])
    except ValueError:
        return DEFAULT_RELEVANCE_SCORE, UNPARSABLE_RELEVANCE_EXPLANATION
    explanation = " ".join(lines[1:]) if len(lines) > 1 else MISSING_RELEVANCE_EXPLANATION
    return score, explanation


async def validate_context_relevance(
    store: PromptTemplateStore,
    completion: ChatCompletionClient,
    question: str,
    context: str,
) -> tuple[int, str]:
    """Rate how relevant ``context`` is to ``question`` (1-5) with an explanation."""
    prompt = build_context_validation_prompt(store, question, context)
    text = await _ask(completion, "You are a relevance assessment expert.", prompt)
    return parse_relevance(text)


def parse_query_category(text: str) -> str:
    """First known category word in the response, else GENERAL."""
    for word in re.findall(r"[A-Za-z]+", text.upper()):
        if word in QUERY_CATEGORIES:
            return word
    return DEFAULT_QUERY_CATEGORY


async def classify_query(
    store: PromptTemplateStore,
    completion: ChatCompletionClient,
    query: str,
) -> str:
    """Classify a user query into one of QUERY_CATEGORIES."""
    prompt = store.get("query_classification", {"USER_QUERY": query})
    text = await _ask(completion, "You are a query classification expert.", prompt)
    category = parse_query_category(text)
    logger.info(f"{__name__}:classify_query - Classified as {category}")
    return category


async def extract_key_phrases(
    store: PromptTemplateStore,
    completion: ChatCompletionClient,
    document: DocumentModel,
) -> str:
    """Extract key phrases and concepts with the ``key_phrase_extraction`` template."""
    prompt = store.get("key_phrase_extraction", {"DOCUMENT_CONTENT": document.content})
    return await _ask(completion, "You are a key phrase extraction expert.", prompt)
