"""
Due-set selection: which cards of a box to study, and in what order.
"""
from typing import List, Optional
from rekard.models.card import Card, due_order_key
from rekard.models.deck import Deck


def select_due_cards(deck: Optional[Deck], box: int) -> List[Card]:
    """
    Build the ordered study queue for one box of a deck.

    Never-reviewed cards come first (ordered by id), followed by reviewed
    cards from the oldest review to the newest. The list is rebuilt on
    every call and holds copies, so callers must ask again after a mutation.

    Args:
        deck: Deck to select from, or None when the deck does not exist
        box: Box number (1-3)

    Returns:
        Ordered list of cards in the box (empty for a missing deck)
    """
    if deck is None:
        return []

    due = [card.model_copy(deep=True) for card in deck.cards_in_box(box)]
    due.sort(key=due_order_key)
    return due
