"""
Test suite for the stateless document analysis functions.

System role: Verification of analysis prompts and response parsing
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from docchat.application import analysis
from docchat.core.exceptions import ValidationError


def _doc(name: str, content: str = "some content") -> SimpleNamespace:
    return SimpleNamespace(
        id=name,
        file_name=name,
        content=content,
        uploaded_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        page_count=1,
        word_count=len(content.split()),
    )


def _sent(mock_completion):
    return mock_completion.complete.call_args.args[0]


class TestParseRelevance:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("4\nCovers the question.\nMostly.", (4, "Covers the question. Mostly.")),
            ("5", (5, "No explanation provided")),
            ("\n 2 \n\nBarely related", (2, "Barely related")),
            ("Four - good", (3, "Could not parse relevance assessment")),
            ("", (3, "Could not parse relevance assessment")),
        ],
    )
    def test_parse(self, text, expected):
        assert analysis.parse_relevance(text) == expected


class TestParseQueryCategory:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("SUMMARY", "SUMMARY"),
            ("  comparison\n", "COMPARISON"),
            ("Category: FACTUAL", "FACTUAL"),
            ("I am not sure", "GENERAL"),
            ("", "GENERAL"),
        ],
    )
    def test_parse(self, text, expected):
        assert analysis.parse_query_category(text) == expected


class TestAnalysisFunctions:
    async def test_summarize_document(self, template_store, mock_completion):
        mock_completion.complete.return_value = "A summary"

        result = await analysis.summarize_document(
            template_store, mock_completion, _doc("paper.pdf", "the body")
        )

        assert result == "A summary"
        system, user = _sent(mock_completion)
        assert system.role == "system"
        assert system.content == "You are a document analysis expert."
        assert "Document: paper.pdf" in user.content
        assert "Content: the body" in user.content

    async def test_compare_requires_two_documents(self, template_store, mock_completion):
        with pytest.raises(ValidationError):
            await analysis.compare_documents(template_store, mock_completion, [_doc("a")])
        mock_completion.complete.assert_not_called()

    async def test_compare_documents_default_focus(self, template_store, mock_completion):
        await analysis.compare_documents(template_store, mock_completion, [_doc("a"), _doc("b")])

        user = _sent(mock_completion)[1]
        assert "## Document 1: a" in user.content
        assert "Focus on: general analysis" in user.content

    async def test_enhance_search_query_splits_lines(self, template_store, mock_completion):
        mock_completion.complete.return_value = "- solar energy\n\n2. photovoltaic cells\n  renewables  "

        terms = await analysis.enhance_search_query(template_store, mock_completion, "solar")

        assert terms == ["solar energy", "photovoltaic cells", "renewables"]

    async def test_validate_context_relevance(self, template_store, mock_completion):
        mock_completion.complete.return_value = "4\nRelevant."

        result = await analysis.validate_context_relevance(
            template_store, mock_completion, "Q?", "ctx"
        )

        assert result == (4, "Relevant.")
        assert "User Question: Q?" in _sent(mock_completion)[1].content

    async def test_classify_query(self, template_store, mock_completion):
        mock_completion.complete.return_value = "ANALYSIS"

        category = await analysis.classify_query(template_store, mock_completion, "why did it fail?")

        assert category == "ANALYSIS"
        assert "Query: why did it fail?" in _sent(mock_completion)[1].content

    async def test_extract_key_phrases(self, template_store, mock_completion):
        mock_completion.complete.return_value = "1. phrase"

        result = await analysis.extract_key_phrases(
            template_store, mock_completion, _doc("x", "key content")
        )

        assert result == "1. phrase"
        assert "key content" in _sent(mock_completion)[1].content
