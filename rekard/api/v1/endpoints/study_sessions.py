"""
Study session endpoints.
"""
from fastapi import APIRouter, Depends, Response, status
from uuid import UUID
from rekard.core.exceptions import NotFoundError
from rekard.schemas.card import ReviewRequest
from rekard.schemas.study_session import StartSessionRequest, StudySessionResponse
from rekard.services.session_registry import SessionRegistry
from rekard.services.study_session import StudySession
from rekard.api.v1.endpoints.utils import get_session_registry, session_to_response

router = APIRouter(prefix="/study-sessions", tags=["study-sessions"])


def _get_open_session(session_id: UUID, registry: SessionRegistry) -> StudySession:
    session = registry.get(session_id)
    if not session:
        raise NotFoundError("Study session not found")
    return session


@router.post("", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED)
async def start_session(
    request: StartSessionRequest,
    registry: SessionRegistry = Depends(get_session_registry)
):
    """
    Start studying one box of a deck.

    A box with no cards (or an unknown deck) yields a session that is already
    finished.
    """
    session = registry.open(request.deck_id, request.box)
    return session_to_response(session)


@router.get("/{session_id}", response_model=StudySessionResponse)
async def get_session(
    session_id: UUID,
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Get the state of an open study session."""
    return session_to_response(_get_open_session(session_id, registry))


@router.post("/{session_id}/flip", response_model=StudySessionResponse)
async def flip_card(
    session_id: UUID,
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Toggle between the question and the answer of the current card."""
    session = _get_open_session(session_id, registry)
    session.flip()
    return session_to_response(session)


@router.post("/{session_id}/judgments", response_model=StudySessionResponse)
async def judge_card(
    session_id: UUID,
    request: ReviewRequest,
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Judge the current card and move on; the response shows the next card or a finished session."""
    session = _get_open_session(session_id, registry)
    session.answer(request.resolved_action)
    return session_to_response(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    session_id: UUID,
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Abandon a study session."""
    registry.close(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
