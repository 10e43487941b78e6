"""
Study session schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from rekard.models.enums import SessionState


class StartSessionRequest(BaseModel):
    """Request schema for starting a study session on one box of a deck."""
    deck_id: UUID
    box: int = Field(..., ge=1, le=3, description="Box to study (1-3)")


class CurrentCardResponse(BaseModel):
    """The card being presented; the answer is only sent once revealed."""
    id: UUID
    question: str
    answer: Optional[str] = None
    box: int


class StudySessionResponse(BaseModel):
    """Study session response schema."""
    session_id: UUID
    deck_id: UUID
    box: int
    state: SessionState
    index: int
    total: int
    remaining: int
    reviewed: int
    current_card: Optional[CurrentCardResponse] = None
