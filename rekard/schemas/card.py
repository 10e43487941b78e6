"""
Card schemas.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID
from rekard.models.enums import Judgment, ReviewAction
from rekard.schemas.utils import optional_text, require_text


class CardResponse(BaseModel):
    """Card response schema."""
    id: UUID
    question: str
    answer: str
    box: int
    last_reviewed: Optional[datetime] = None

    class Config:
        from_attributes = True


class CardsResponse(BaseModel):
    """Response schema for a list of cards."""
    cards: List[CardResponse]


class CreateCardRequest(BaseModel):
    """Request schema for creating a card (always starts in box 1)."""
    question: str
    answer: str

    @field_validator('question')
    @classmethod
    def validate_question(cls, v):
        return require_text(v, "question")

    @field_validator('answer')
    @classmethod
    def validate_answer(cls, v):
        return require_text(v, "answer")


class UpdateCardRequest(BaseModel):
    """Request schema for editing a card's text."""
    question: Optional[str] = None
    answer: Optional[str] = None

    @field_validator('question')
    @classmethod
    def validate_question(cls, v):
        return optional_text(v, "question")

    @field_validator('answer')
    @classmethod
    def validate_answer(cls, v):
        return optional_text(v, "answer")


class ReviewRequest(BaseModel):
    """Request schema for a review: either a raw action or a user judgment."""
    action: Optional[ReviewAction] = None
    judgment: Optional[Judgment] = None

    @model_validator(mode='after')
    def exactly_one(self):
        if (self.action is None) == (self.judgment is None):
            raise ValueError("Provide exactly one of 'action' or 'judgment'")
        return self

    @property
    def resolved_action(self) -> ReviewAction:
        return self.action if self.action is not None else self.judgment.action


class SetBoxRequest(BaseModel):
    """Request schema for moving a card to a box."""
    box: int = Field(..., ge=1, le=3, description="Target box (1-3)")


class ReviewResultResponse(BaseModel):
    """Result of a transition; applied is false when the card no longer exists."""
    applied: bool
    card: Optional[CardResponse] = None
