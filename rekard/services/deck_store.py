"""
Deck store: the single owner and mutator of the deck collection.

Every mutation is persisted synchronously through the repository before it
returns, then announced to subscribed listeners. Reads hand out deep copies.
Unknown deck or card ids are silent no-ops.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple
from uuid import UUID
from rekard.models.card import Card
from rekard.models.deck import Deck
from rekard.models.enums import ChangeKind, ReviewAction
from rekard.repositories.deck_repository import DeckRepository
from rekard.services import leitner_service, stats_service
from rekard.services.due_set_service import select_due_cards
from rekard.services.search_service import DeckSearchResult, search_decks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreChange:
    kind: ChangeKind
    deck_id: UUID
    card_id: Optional[UUID] = None


Listener = Callable[[StoreChange], None]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeckStore:
    def __init__(self, repository: DeckRepository, clock: Callable[[], datetime] = None):
        self.repository = repository
        self.clock = clock or utcnow
        self._decks: List[Deck] = repository.load_all()
        self._listeners: List[Listener] = []
        logger.info(f"Deck store ready with {len(self._decks)} deck(s)")

    # Change notification

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: StoreChange):
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                logger.warning(f"Store listener failed on {change.kind.value}: {e}", exc_info=e)

    def _commit(self, change: StoreChange):
        self.repository.save_all(self._decks)
        self._notify(change)

    # Lookup

    def _deck_index(self, deck_id: UUID) -> Optional[int]:
        for idx, deck in enumerate(self._decks):
            if deck.id == deck_id:
                return idx
        return None

    def _locate_card(self, card_id: UUID, deck_id: UUID) -> Optional[Tuple[Deck, int]]:
        d_idx = self._deck_index(deck_id)
        if d_idx is None:
            return None
        deck = self._decks[d_idx]
        c_idx = deck.card_index(card_id)
        if c_idx is None:
            return None
        return deck, c_idx

    # Reads

    @property
    def decks(self) -> List[Deck]:
        return [deck.model_copy(deep=True) for deck in self._decks]

    def get_deck(self, deck_id: UUID) -> Optional[Deck]:
        idx = self._deck_index(deck_id)
        if idx is None:
            return None
        return self._decks[idx].model_copy(deep=True)

    def get_card(self, card_id: UUID, deck_id: UUID) -> Optional[Card]:
        located = self._locate_card(card_id, deck_id)
        if located is None:
            return None
        deck, c_idx = located
        return deck.cards[c_idx].model_copy(deep=True)

    def due_cards(self, deck_id: UUID, box: int) -> List[Card]:
        idx = self._deck_index(deck_id)
        deck = self._decks[idx] if idx is not None else None
        return select_due_cards(deck, box)

    def cards_in_box(self, deck_id: UUID, box: int) -> int:
        idx = self._deck_index(deck_id)
        if idx is None:
            return 0
        return stats_service.cards_in_box(self._decks[idx], box)

    def box_counts(self, deck_id: UUID) -> Optional[Dict[int, int]]:
        idx = self._deck_index(deck_id)
        if idx is None:
            return None
        return stats_service.box_counts(self._decks[idx])

    def total_cards_in_box(self, box: int) -> int:
        return stats_service.total_cards_in_box(self._decks, box)

    def search(self, query: str) -> List[DeckSearchResult]:
        return search_decks(self.decks, query)

    # Deck CRUD

    def add_deck(self, deck: Deck) -> Optional[Deck]:
        """Prepend a deck; returns None if its id is taken or its card ids repeat."""
        if self._deck_index(deck.id) is not None:
            logger.debug(f"Ignoring add of existing deck {deck.id}")
            return None
        if not deck.has_unique_card_ids():
            logger.warning(f"Rejecting deck {deck.id} with repeated card ids")
            return None
        deck = deck.model_copy(deep=True)
        self._decks.insert(0, deck)
        self._commit(StoreChange(ChangeKind.DECK_ADDED, deck.id))
        return deck.model_copy(deep=True)

    def update_deck(self, deck: Deck) -> Optional[Deck]:
        """Replace a stored deck; returns None if it is missing or its card ids repeat."""
        idx = self._deck_index(deck.id)
        if idx is None:
            return None
        if not deck.has_unique_card_ids():
            logger.warning(f"Rejecting update of deck {deck.id} with repeated card ids")
            return None
        self._decks[idx] = deck.model_copy(deep=True)
        self._commit(StoreChange(ChangeKind.DECK_UPDATED, deck.id))
        return self._decks[idx].model_copy(deep=True)

    def remove_deck(self, deck_id: UUID) -> bool:
        idx = self._deck_index(deck_id)
        if idx is None:
            return False
        del self._decks[idx]
        self._commit(StoreChange(ChangeKind.DECK_REMOVED, deck_id))
        return True

    # Card CRUD

    def add_card(self, card: Card, deck_id: UUID) -> Optional[Card]:
        idx = self._deck_index(deck_id)
        if idx is None:
            return None
        if self._decks[idx].card_index(card.id) is not None:
            logger.debug(f"Ignoring add of existing card {card.id} in deck {deck_id}")
            return None
        card = card.model_copy(deep=True)
        self._decks[idx].cards.insert(0, card)
        self._commit(StoreChange(ChangeKind.CARD_ADDED, deck_id, card.id))
        return card.model_copy(deep=True)

    def update_card(self, card: Card, deck_id: UUID) -> Optional[Card]:
        located = self._locate_card(card.id, deck_id)
        if located is None:
            return None
        deck, c_idx = located
        deck.cards[c_idx] = card.model_copy(deep=True)
        self._commit(StoreChange(ChangeKind.CARD_UPDATED, deck_id, card.id))
        return deck.cards[c_idx].model_copy(deep=True)

    def remove_card(self, card_id: UUID, deck_id: UUID) -> bool:
        located = self._locate_card(card_id, deck_id)
        if located is None:
            return False
        deck, c_idx = located
        del deck.cards[c_idx]
        self._commit(StoreChange(ChangeKind.CARD_REMOVED, deck_id, card_id))
        return True

    # Leitner transitions

    def review(self, card_id: UUID, deck_id: UUID, action: ReviewAction) -> Optional[Card]:
        """Apply a review action; returns the updated card, or None if it no longer exists."""
        located = self._locate_card(card_id, deck_id)
        if located is None:
            logger.debug(f"Ignoring {action.value} for missing card {card_id} in deck {deck_id}")
            return None
        deck, c_idx = located
        card = leitner_service.apply_review(deck.cards[c_idx], action, self.clock())
        self._commit(StoreChange(ChangeKind.CARD_REVIEWED, deck_id, card_id))
        return card.model_copy(deep=True)

    def promote(self, card_id: UUID, deck_id: UUID) -> Optional[Card]:
        return self.review(card_id, deck_id, ReviewAction.PROMOTE)

    def demote(self, card_id: UUID, deck_id: UUID) -> Optional[Card]:
        return self.review(card_id, deck_id, ReviewAction.DEMOTE)

    def mark_kind_of_know(self, card_id: UUID, deck_id: UUID) -> Optional[Card]:
        return self.review(card_id, deck_id, ReviewAction.KIND_OF_KNOW)

    def touch(self, card_id: UUID, deck_id: UUID) -> Optional[Card]:
        return self.review(card_id, deck_id, ReviewAction.TOUCH)

    def set_box(self, card_id: UUID, deck_id: UUID, box: int) -> Optional[Card]:
        located = self._locate_card(card_id, deck_id)
        if located is None:
            return None
        deck, c_idx = located
        card = leitner_service.set_box(deck.cards[c_idx], box)
        self._commit(StoreChange(ChangeKind.CARD_UPDATED, deck_id, card_id))
        return card.model_copy(deep=True)
