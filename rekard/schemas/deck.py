"""
Deck schemas.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from uuid import UUID
from rekard.models.deck import DEFAULT_DECK_ICON, ColorData, default_deck_color
from rekard.schemas.card import CardResponse
from rekard.schemas.utils import optional_text, require_text


class DeckResponse(BaseModel):
    """Deck response schema."""
    id: UUID
    name: str
    icon: str
    color: ColorData
    cards: List[CardResponse] = []

    class Config:
        from_attributes = True


class DecksResponse(BaseModel):
    """Response schema for decks list."""
    decks: List[DeckResponse]


class CreateDeckRequest(BaseModel):
    """Request schema for creating a deck."""
    name: str
    icon: str = DEFAULT_DECK_ICON
    color: ColorData = Field(default_factory=default_deck_color)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return require_text(v, "name")

    @field_validator('icon')
    @classmethod
    def validate_icon(cls, v):
        return v.strip() if v and v.strip() else DEFAULT_DECK_ICON


class UpdateDeckRequest(BaseModel):
    """Request schema for updating deck presentation metadata."""
    name: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[ColorData] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return optional_text(v, "name")

    @field_validator('icon')
    @classmethod
    def validate_icon(cls, v):
        return optional_text(v, "icon")


class DeckStatsResponse(BaseModel):
    """Card count per box for one deck."""
    deck_id: UUID
    total: int
    boxes: Dict[int, int]


class BoxTotalsResponse(BaseModel):
    """Card count per box across all decks."""
    boxes: Dict[int, int]
