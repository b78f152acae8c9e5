"""
Chat API endpoints.

Routes:
- POST /chat/sessions - Create session (optionally scoped to a document)
- GET /chat/sessions - List sessions, most recently updated first
- GET /chat/sessions/{id} - Session with ordered messages
- DELETE /chat/sessions/{id} - Delete session and its messages
- POST /chat/sessions/{id}/messages - Send a message, get the assistant reply

Dependencies: docchat.application.services.chat_service, docchat.models
System role: Chat HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from docchat.api.deps import get_chat_service
from docchat.application.services.chat_service import ChatService
from docchat.core.exceptions import NotFoundError
from docchat.models.chat import (
    ChatMessageResponse,
    ChatSessionDetailResponse,
    ChatSessionResponse,
    CreateChatSessionRequest,
    SendMessageRequest,
)
from docchat.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post("/sessions", response_model=ChatSessionResponse)
async def create_session(
    request: CreateChatSessionRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatSessionResponse:
    """
    Create a chat session.

    Raises:
        HTTPException(404): document_id does not reference a document
        HTTPException(500): Creation failed
    """
    try:
        chat_session = await chat_service.create_session(
            title=request.title,
            document_id=request.document_id,
        )
        return ChatSessionResponse.model_validate(chat_session)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Session creation failed: {str(e)}",
        )


@router.get("/sessions", response_model=list[ChatSessionResponse])
async def list_sessions(
    chat_service: ChatService = Depends(get_chat_service),
) -> list[ChatSessionResponse]:
    """List sessions ordered by last update, each with its document summary."""
    try:
        sessions = await chat_service.list_sessions()
        return [ChatSessionResponse.model_validate(s) for s in sessions]
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve sessions: {str(e)}",
        )


@router.get("/sessions/{session_id}", response_model=ChatSessionDetailResponse, responses=NOT_FOUND)
async def get_session(
    session_id: UUID,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatSessionDetailResponse:
    """
    Get a session with its messages in timestamp order.

    Raises:
        HTTPException(404): Session not found
    """
    try:
        chat_session = await chat_service.get_session(session_id)
        return ChatSessionDetailResponse.model_validate(chat_session)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve session: {str(e)}",
        )


@router.delete("/sessions/{session_id}", status_code=204, responses=NOT_FOUND)
async def delete_session(
    session_id: UUID,
    chat_service: ChatService = Depends(get_chat_service),
) -> None:
    """
    Delete a session and all of its messages.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Deletion failed
    """
    try:
        await chat_service.delete_session(session_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Session deletion failed: {str(e)}",
        )


@router.post("/sessions/{session_id}/messages", response_model=ChatMessageResponse, responses=NOT_FOUND)
async def send_message(
    session_id: UUID,
    request: SendMessageRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatMessageResponse:
    """
    Send a user message and return the assistant's reply.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Retrieval, completion, or persistence failed
    """
    try:
        message = await chat_service.send_message(session_id, request.content)
        return ChatMessageResponse.model_validate(message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(
            f"{__name__}:send_message - {type(e).__name__}: {e}",
            extra={"session_id": str(session_id)},
        )
        raise HTTPException(
            status_code=500,
            detail=f"Error processing message: {str(e)}",
        )
