"""
Models package - re-exports the domain models and the persistence table.
"""
# Import enums first
from rekard.models.enums import Box, ChangeKind, Judgment, ReviewAction, SessionState

# Import all models
from rekard.models.review_state import ReviewState, ReviewedAt, Unreviewed
from rekard.models.card import Card, clamp_box, due_order_key
from rekard.models.deck import ColorData, Deck
from rekard.models.deck_snapshot import DeckSnapshot

__all__ = [
    'Box',
    'ChangeKind',
    'Judgment',
    'ReviewAction',
    'SessionState',
    'ReviewState',
    'ReviewedAt',
    'Unreviewed',
    'Card',
    'clamp_box',
    'due_order_key',
    'ColorData',
    'Deck',
    'DeckSnapshot',
]
