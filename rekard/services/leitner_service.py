"""
Leitner service implementing the 3-box review state machine.

Boxes: 1 = Don't Know, 2 = Kind of Know, 3 = Know.
Judgments at the edges are clamped, not rejected, and every judgment
stamps the card with the review time.
"""
import logging
from datetime import datetime
from rekard.models.card import Card, MAX_BOX, MIN_BOX, clamp_box
from rekard.models.enums import Box, ReviewAction

logger = logging.getLogger(__name__)


def promote_box(box: int) -> int:
    """Move up one box (max box 3)."""
    return min(MAX_BOX, box + 1)


def demote_box(box: int) -> int:
    """Move down one box (min box 1)."""
    return max(MIN_BOX, box - 1)


def kind_of_know_box(box: int) -> int:
    """
    "Kind of know" is an absolute assignment to box 2.

    A card in box 3 therefore moves down, and a card in box 1 moves up.
    """
    return int(Box.KIND_OF_KNOW)


def next_box(current_box: int, action: ReviewAction) -> int:
    """
    Compute the box a card lands in after a review action.

    Args:
        current_box: Current box (1-3)
        action: Review action to apply

    Returns:
        New box
    """
    current_box = clamp_box(current_box)

    if action == ReviewAction.PROMOTE:
        return promote_box(current_box)
    elif action == ReviewAction.DEMOTE:
        return demote_box(current_box)
    elif action == ReviewAction.KIND_OF_KNOW:
        return kind_of_know_box(current_box)
    elif action == ReviewAction.TOUCH:
        # Exposure only: box unchanged
        return current_box
    raise ValueError(f"Unknown review action: {action}")


def apply_review(card: Card, action: ReviewAction, now: datetime) -> Card:
    """
    Apply a review action to a card in place.

    The box follows `next_box` and `last_reviewed` is set to `now` for every
    action, including promotions in box 3 and demotions in box 1.

    Args:
        card: Card to update
        action: Review action to apply
        now: Review timestamp

    Returns:
        The same card, updated
    """
    old_box = card.box
    card.box = next_box(old_box, action)
    card.last_reviewed = now
    logger.debug(f"Card {card.id}: {action.value} box {old_box} -> {card.box}")
    return card


def set_box(card: Card, box: int) -> Card:
    """Move a card to an explicit box (clamped); the review timestamp is left alone."""
    card.box = clamp_box(box)
    return card
