"""
Document analysis API endpoints.

Routes:
- POST /analysis/documents/{id}/summary - Summarize a document
- POST /analysis/documents/{id}/key-phrases - Extract key phrases
- POST /analysis/compare - Compare two or more documents
- POST /analysis/query/enhance - Alternative search terms for a query
- POST /analysis/query/classify - Query intent category
- POST /analysis/relevance - Rate context relevance to a question

Dependencies: docchat.application.analysis, docchat.models.analysis
System role: Document/query analysis HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from docchat.api.deps import get_completion_client, get_document_service, get_template_store
from docchat.application import analysis
from docchat.application.services.document_service import DocumentService
from docchat.boundary.llm.chat_client import ChatCompletionClient
from docchat.core.exceptions import NotFoundError, ValidationError
from docchat.core.prompts import PromptTemplateStore
from docchat.models.analysis import (
    AnalysisTextResponse,
    CompareDocumentsRequest,
    EnhancedQueryResponse,
    QueryClassificationResponse,
    QueryRequest,
    RelevanceRequest,
    RelevanceResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("/documents/{document_id}/summary", response_model=AnalysisTextResponse)
async def summarize_document(
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
    store: PromptTemplateStore = Depends(get_template_store),
    completion: ChatCompletionClient = Depends(get_completion_client),
) -> AnalysisTextResponse:
    """
    Summarize one document.

    Raises:
        HTTPException(404): Document not found
        HTTPException(500): Completion failed
    """
    try:
        document = await document_service.get_document(document_id)
        text = await analysis.summarize_document(store, completion, document)
        return AnalysisTextResponse(text=text, document_ids=[document_id])
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error summarizing document: {str(e)}")


@router.post("/documents/{document_id}/key-phrases", response_model=AnalysisTextResponse)
async def extract_key_phrases(
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
    store: PromptTemplateStore = Depends(get_template_store),
    completion: ChatCompletionClient = Depends(get_completion_client),
) -> AnalysisTextResponse:
    """Extract key phrases and concepts from one document."""
    try:
        document = await document_service.get_document(document_id)
        text = await analysis.extract_key_phrases(store, completion, document)
        return AnalysisTextResponse(text=text, document_ids=[document_id])
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error extracting key phrases: {str(e)}")


@router.post("/compare", response_model=AnalysisTextResponse)
async def compare_documents(
    request: CompareDocumentsRequest,
    document_service: DocumentService = Depends(get_document_service),
    store: PromptTemplateStore = Depends(get_template_store),
    completion: ChatCompletionClient = Depends(get_completion_client),
) -> AnalysisTextResponse:
    """
    Compare two or more documents.

    Raises:
        HTTPException(400): Fewer than two documents
        HTTPException(404): A document was not found
        HTTPException(500): Completion failed
    """
    try:
        documents = await document_service.get_documents(request.document_ids)
        text = await analysis.compare_documents(store, completion, documents, request.focus)
        return AnalysisTextResponse(text=text, document_ids=[doc.id for doc in documents])
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error comparing documents: {str(e)}")


@router.post("/query/enhance", response_model=EnhancedQueryResponse)
async def enhance_query(
    request: QueryRequest,
    store: PromptTemplateStore = Depends(get_template_store),
    completion: ChatCompletionClient = Depends(get_completion_client),
) -> EnhancedQueryResponse:
    try:
        alternatives = await analysis.enhance_search_query(store, completion, request.query)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error enhancing query: {str(e)}")
    return EnhancedQueryResponse(query=request.query, alternatives=alternatives)


@router.post("/query/classify", response_model=QueryClassificationResponse)
async def classify_query(
    request: QueryRequest,
    store: PromptTemplateStore = Depends(get_template_store),
    completion: ChatCompletionClient = Depends(get_completion_client),
) -> QueryClassificationResponse:
    try:
        category = await analysis.classify_query(store, completion, request.query)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error classifying query: {str(e)}")
    return QueryClassificationResponse(query=request.query, category=category)


@router.post("/relevance", response_model=RelevanceResponse)
async def validate_relevance(
    request: RelevanceRequest,
    store: PromptTemplateStore = Depends(get_template_store),
    completion: ChatCompletionClient = Depends(get_completion_client),
) -> RelevanceResponse:
    """Rate the relevance of a context passage to a question (1-5)."""
    try:
        score, explanation = await analysis.validate_context_relevance(
            store, completion, request.question, request.context
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error assessing relevance: {str(e)}")
    return RelevanceResponse(score=score, explanation=explanation)
