"""StudySession: sequences one box of a deck through judgments."""

import logging
import uuid
from typing import Callable, List, Optional
from uuid import UUID
from rekard.core.exceptions import SessionStateError
from rekard.models.card import Card
from rekard.models.enums import Judgment, ReviewAction, SessionState
from rekard.services.deck_store import DeckStore

logger = logging.getLogger(__name__)


class StudySession:
    """
    Presents the due set of (deck, box) one card at a time.

    After every judgment the due set is reloaded from the store and the
    session relocates the card it just judged:

    - if the card is still in the due set (a touch leaves it in the box),
      study resumes right after it;
    - otherwise the same index now points at what was the next card.

    The session finishes once the index runs past the due set.
    """

    def __init__(self, store: DeckStore, deck_id: UUID, box: int,
                 on_finished: Optional[Callable[["StudySession"], None]] = None):
        self.store = store
        self.deck_id = deck_id
        self.box = box
        self.on_finished = on_finished
        self.session_id = uuid.uuid4()
        self.state = SessionState.IDLE
        self.index = 0
        self.cards: List[Card] = []
        self.reviewed = 0

    @property
    def current_card(self) -> Optional[Card]:
        if self.state not in (SessionState.PRESENTING, SessionState.AWAITING_REVEAL):
            return None
        return self.cards[self.index]

    @property
    def is_revealed(self) -> bool:
        return self.state == SessionState.AWAITING_REVEAL

    @property
    def remaining(self) -> int:
        if self.state == SessionState.FINISHED:
            return 0
        return max(0, len(self.cards) - self.index)

    def start(self) -> Optional[Card]:
        if self.state != SessionState.IDLE:
            raise SessionStateError(f"Session already started ({self.state.value})")
        self.cards = self.store.due_cards(self.deck_id, self.box)
        self.index = 0
        logger.info(f"Study session {self.session_id}: deck {self.deck_id}, box {self.box}, {len(self.cards)} card(s)")
        self._present_or_finish()
        return self.current_card

    def flip(self) -> bool:
        """Toggle between question and answer; card state is untouched."""
        if self.state == SessionState.PRESENTING:
            self.state = SessionState.AWAITING_REVEAL
        elif self.state == SessionState.AWAITING_REVEAL:
            self.state = SessionState.PRESENTING
        else:
            raise SessionStateError(f"No card to flip ({self.state.value})")
        return self.is_revealed

    def judge(self, judgment: Judgment) -> Optional[Card]:
        return self.answer(judgment.action)

    def answer(self, action: ReviewAction) -> Optional[Card]:
        """Apply `action` to the current card and advance; returns the next card or None."""
        card = self.current_card
        if card is None:
            raise SessionStateError(f"No current card ({self.state.value})")

        self.store.review(card.id, self.deck_id, action)
        self.reviewed += 1

        self.cards = self.store.due_cards(self.deck_id, self.box)
        found = next((i for i, c in enumerate(self.cards) if c.id == card.id), None)
        if found is not None:
            self.index = found + 1
        # otherwise the judged card left the box and self.index already points at the next one

        self._present_or_finish()
        return self.current_card

    def _present_or_finish(self):
        if self.index >= len(self.cards):
            self._finish()
        else:
            self.state = SessionState.PRESENTING

    def _finish(self):
        if self.state == SessionState.FINISHED:
            return
        self.state = SessionState.FINISHED
        logger.info(f"Study session {self.session_id} finished after {self.reviewed} judgment(s)")
        if self.on_finished:
            self.on_finished(self)
