"""
Document API endpoints.

Routes:
- POST /documents/upload - Ingest an uploaded file
- GET /documents - List documents, newest first
- GET /documents/search - Hybrid search with content previews
- POST /documents/reindex - Re-push documents whose indexing failed
- GET /documents/{id} - Full document
- DELETE /documents/{id} - Delete document and its index entry

Dependencies: docchat.application.services.document_service, docchat.models
System role: Document management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from docchat.api.deps import get_document_service
from docchat.application.services.document_service import DocumentService, IncomingFile
from docchat.core.exceptions import DocumentNotFoundError
from docchat.models.common import ErrorResponse
from docchat.models.document import (
    DeleteDocumentResponse,
    DocumentResponse,
    DocumentSearchResult,
    DocumentSummary,
    ReindexResponse,
    content_preview,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post("/upload", response_model=DocumentResponse)
async def upload_document(
    file: UploadFile | None = File(default=None),
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Upload and ingest a document.

    Args:
        file: Multipart file field
        document_service: Injected DocumentService

    Returns:
        DocumentResponse: Ingested document

    Raises:
        HTTPException(400): No file or empty file
        HTTPException(500): Any ingestion failure
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    try:
        document = await document_service.process(
            IncomingFile(
                file_name=file.filename,
                content_type=file.content_type or "application/octet-stream",
                size_bytes=len(data),
                data=data,
            )
        )
        return DocumentResponse.model_validate(document)
    except Exception as e:
        logger.error(f"{__name__}:upload_document - {type(e).__name__}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Error processing document: {str(e)}",
        )


@router.get("", response_model=list[DocumentSummary])
async def list_documents(
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentSummary]:
    """List all documents ordered by upload time (newest first)."""
    try:
        documents = await document_service.list_documents()
        return [DocumentSummary.model_validate(doc) for doc in documents]
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to list documents: {str(e)}",
        )


@router.get("/search", response_model=list[DocumentSearchResult])
async def search_documents(
    query: str = Query(default=""),
    max_results: int = Query(default=5, alias="maxResults", ge=1, le=50),
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentSearchResult]:
    """
    Search documents.

    Args:
        query: Search text
        max_results: Maximum number of results
        document_service: Injected DocumentService

    Returns:
        list[DocumentSearchResult]: Ranked documents with content previews

    Raises:
        HTTPException(400): Blank query
        HTTPException(500): Search failed
    """
    if not query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    try:
        documents = await document_service.search(query, max_results=max_results)
        return [
            DocumentSearchResult(
                **DocumentSummary.model_validate(doc).model_dump(),
                content_preview=content_preview(doc.content),
            )
            for doc in documents
        ]
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Error searching documents: {str(e)}",
        )


@router.post("/reindex", response_model=ReindexResponse)
async def reindex_documents(
    document_service: DocumentService = Depends(get_document_service),
) -> ReindexResponse:
    """Re-push documents whose search index write failed."""
    try:
        outcome = await document_service.reindex_failed()
        return ReindexResponse(reindexed=outcome.reindexed, failed=outcome.failed)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Error re-indexing documents: {str(e)}",
        )


@router.get("/{document_id}", response_model=DocumentResponse, responses=NOT_FOUND)
async def get_document(
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Get a document by ID.

    Raises:
        HTTPException(404): Document not found
        HTTPException(500): Retrieval failed
    """
    try:
        document = await document_service.get_document(document_id)
        return DocumentResponse.model_validate(document)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve document: {str(e)}",
        )


@router.delete("/{document_id}", response_model=DeleteDocumentResponse, responses=NOT_FOUND)
async def delete_document(
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DeleteDocumentResponse:
    """
    Delete a document.

    Chat sessions scoped to the document survive with their document
    reference cleared.

    Raises:
        HTTPException(404): Document not found
        HTTPException(500): Deletion failed
    """
    try:
        await document_service.delete_document(document_id)
        return DeleteDocumentResponse(id=document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Error deleting document: {str(e)}",
        )
