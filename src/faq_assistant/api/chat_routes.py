"""
Chat Routes: FAQ Chat Widget Interface

This module implements the endpoints used by the website's chat widget:
- Opening a session (greeting plus any knowledge-base diagnostic)
- Submitting a user message and receiving the matched FAQ answer
- Reading back or discarding a session transcript

Every message receives a non-empty answer; unmatched or blank input is
answered with a fallback message rather than an error.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Annotated

from .models import ChatRequest, ChatResponse, SessionResponse, OperationResult
from ..chat.assistant import ChatAssistant
from ..sessions.store import SessionStore
from .dependencies import get_assistant, get_session_store

router = APIRouter(prefix="/chat", tags=["chat"])


def _require_session(store: SessionStore, session_id: str) -> None:
    if not store.has_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown chat session: {session_id}",
        )


@router.post(
    "/sessions",
    response_model=SessionResponse,
    summary="Open a chat session",
    status_code=status.HTTP_201_CREATED,
)
def open_session(
    assistant: Annotated[ChatAssistant, Depends(get_assistant)],
) -> SessionResponse:
    session_id, messages = assistant.open_session()
    return SessionResponse(session_id=session_id, messages=messages)


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    summary="Read a chat transcript",
)
def get_session(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> SessionResponse:
    _require_session(store, session_id)
    return SessionResponse(session_id=session_id, messages=store.get_history(session_id))


@router.delete(
    "/sessions/{session_id}",
    response_model=OperationResult,
    summary="Discard a chat transcript",
)
def delete_session(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> OperationResult:
    _require_session(store, session_id)
    store.clear(session_id)
    return OperationResult(status="deleted")


@router.post(
    "/",
    response_model=ChatResponse,
    summary="Ask the FAQ assistant a question",
    status_code=status.HTTP_200_OK,
)
def chat(
    req: ChatRequest,
    assistant: Annotated[ChatAssistant, Depends(get_assistant)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ChatResponse:
    """
    Answer one user message.

    Parameters
    ----------
    req : ChatRequest
        Contains:
        - message: Raw user text
        - session_id: Optional session to record the exchange in

    Returns
    -------
    ChatResponse
        Matched answer (or fallback) and its similarity score.
    """
    if req.session_id:
        _require_session(store, req.session_id)

    result = assistant.submit_query(req.message, session_id=req.session_id)

    return ChatResponse(
        answer=result.answer,
        score=result.score,
        matched=result.matched,
        session_id=req.session_id,
    )
