"""
Document analysis schemas.

Dependencies: pydantic
System role: Analysis API contracts
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class AnalysisTextResponse(BaseModel):
    """Free-text analysis output (summary, comparison, key phrases)."""

    text: str
    document_ids: list[uuid.UUID] = Field(default_factory=list)


class CompareDocumentsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_ids: list[uuid.UUID] = Field(alias="documentIds", min_length=2)
    focus: str | None = None


class QueryRequest(BaseModel):
    query: str = Field(min_length=1)


class EnhancedQueryResponse(BaseModel):
    query: str
    alternatives: list[str]


class QueryClassificationResponse(BaseModel):
    query: str
    category: str


class RelevanceRequest(BaseModel):
    question: str = Field(min_length=1)
    context: str


class RelevanceResponse(BaseModel):
    score: int = Field(description="Relevance from 1 (irrelevant) to 5 (highly relevant)")
    explanation: str
