"""
Deck model.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID, uuid4
from rekard.models.card import Card

DEFAULT_DECK_ICON = "book.fill"


class ColorData(BaseModel):
    """RGBA colour with every channel in [0, 1]."""
    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


def default_deck_color() -> ColorData:
    return ColorData(red=0.85, green=0.45, blue=0.45, opacity=1.0)


class Deck(BaseModel):
    """A named, coloured collection of cards (newest cards first)."""
    id: UUID = Field(default_factory=uuid4, frozen=True)
    name: str
    icon: str = DEFAULT_DECK_ICON
    color: ColorData = Field(default_factory=default_deck_color)
    cards: List[Card] = Field(default_factory=list)

    def card_index(self, card_id: UUID) -> Optional[int]:
        for idx, card in enumerate(self.cards):
            if card.id == card_id:
                return idx
        return None

    def has_unique_card_ids(self) -> bool:
        return len({card.id for card in self.cards}) == len(self.cards)

    def cards_in_box(self, box: int) -> List[Card]:
        return [card for card in self.cards if card.box == box]
