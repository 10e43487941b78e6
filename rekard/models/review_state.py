"""
Review state of a card: never reviewed, or reviewed at a point in time.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Union


@dataclass(frozen=True)
class Unreviewed:
    """The card has not received a judgment yet."""


@dataclass(frozen=True)
class ReviewedAt:
    """The card was last reviewed at `at`."""
    at: datetime


ReviewState = Union[Unreviewed, ReviewedAt]


def review_order_key(state: ReviewState, card_id: str) -> Tuple:
    """
    Total order used for due sets.

    Unreviewed sorts before any ReviewedAt, reviewed states sort by timestamp,
    and ties in either group fall back to the card identifier.
    """
    if isinstance(state, ReviewedAt):
        return (1, state.at, card_id)
    return (0, card_id)
