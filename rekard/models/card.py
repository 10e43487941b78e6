"""
Card model.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime, timezone
from uuid import UUID, uuid4
from rekard.models.enums import Box
from rekard.models.review_state import ReviewState, ReviewedAt, Unreviewed, review_order_key

MIN_BOX = int(Box.DONT_KNOW)
MAX_BOX = int(Box.KNOW)


def clamp_box(box: int) -> int:
    """Clamp a box number into the Leitner range."""
    return max(MIN_BOX, min(MAX_BOX, int(box)))


class Card(BaseModel):
    """A flashcard and its position in the Leitner boxes."""
    id: UUID = Field(default_factory=uuid4, frozen=True)
    question: str
    answer: str
    box: int = Field(default=int(Box.DONT_KNOW))
    last_reviewed: Optional[datetime] = None

    class Config:
        validate_assignment = True

    @field_validator('box')
    @classmethod
    def clamp_box_value(cls, v):
        """Keep the box inside 1..3 whatever was assigned."""
        return clamp_box(v)

    @field_validator('last_reviewed')
    @classmethod
    def ensure_timezone(cls, v):
        """Treat naive timestamps as UTC so every card compares on one clock."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def review_state(self) -> ReviewState:
        if self.last_reviewed is None:
            return Unreviewed()
        return ReviewedAt(self.last_reviewed)


def due_order_key(card: Card):
    """Sort key putting never-reviewed cards first, then oldest review first."""
    return review_order_key(card.review_state, str(card.id))
