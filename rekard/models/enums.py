"""
Model enums.
"""
from enum import Enum, IntEnum


class Box(IntEnum):
    """Leitner boxes a card can sit in."""
    DONT_KNOW = 1
    KIND_OF_KNOW = 2
    KNOW = 3


class ReviewAction(str, Enum):
    """Transitions the review state machine can apply to a card."""
    PROMOTE = "promote"
    DEMOTE = "demote"
    KIND_OF_KNOW = "kind_of_know"
    TOUCH = "touch"


class Judgment(str, Enum):
    """Outcome a user gives for a presented card."""
    FAIL = "fail"
    PARTIAL = "partial"
    PASS = "pass"

    @property
    def action(self) -> ReviewAction:
        return JUDGMENT_ACTIONS[self]


JUDGMENT_ACTIONS = {
    Judgment.FAIL: ReviewAction.DEMOTE,
    Judgment.PARTIAL: ReviewAction.KIND_OF_KNOW,
    Judgment.PASS: ReviewAction.PROMOTE,
}


class SessionState(str, Enum):
    """States of a study session."""
    IDLE = "idle"
    PRESENTING = "presenting"
    AWAITING_REVEAL = "awaiting_reveal"
    FINISHED = "finished"


class ChangeKind(str, Enum):
    """Kinds of change the deck store announces to its listeners."""
    DECK_ADDED = "deck_added"
    DECK_UPDATED = "deck_updated"
    DECK_REMOVED = "deck_removed"
    CARD_ADDED = "card_added"
    CARD_UPDATED = "card_updated"
    CARD_REMOVED = "card_removed"
    CARD_REVIEWED = "card_reviewed"
