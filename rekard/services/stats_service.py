"""
Box statistics for decks.
"""
from typing import Dict, Iterable
from rekard.models.deck import Deck
from rekard.models.enums import Box


def cards_in_box(deck: Deck, box: int) -> int:
    """Number of cards of a deck sitting in a box."""
    return len(deck.cards_in_box(box))


def box_counts(deck: Deck) -> Dict[int, int]:
    """Card count per box, every box present."""
    return {int(box): cards_in_box(deck, box) for box in Box}


def total_cards_in_box(decks: Iterable[Deck], box: int) -> int:
    """Number of cards in a box across all decks."""
    return sum(cards_in_box(deck, box) for deck in decks)
