"""
Search over decks and their cards.
"""
from dataclasses import dataclass, field
from typing import Iterable, List
from rekard.models.card import Card
from rekard.models.deck import Deck


@dataclass
class DeckSearchResult:
    deck: Deck
    cards: List[Card] = field(default_factory=list)


def _contains(text: str, query: str) -> bool:
    return query in text.casefold()


def card_matches(card: Card, query: str) -> bool:
    query = query.strip().casefold()
    return _contains(card.question, query) or _contains(card.answer, query)


def search_decks(decks: Iterable[Deck], query: str) -> List[DeckSearchResult]:
    """
    Case-insensitive search over deck names, questions and answers.

    An empty query returns every deck with all of its cards. Otherwise a deck
    is returned when its name or any of its cards match, together with the
    matching cards only.
    """
    needle = query.strip().casefold()
    results = []
    for deck in decks:
        if not needle:
            results.append(DeckSearchResult(deck=deck, cards=list(deck.cards)))
            continue

        matching = [card for card in deck.cards if card_matches(card, needle)]
        if matching or _contains(deck.name, needle):
            results.append(DeckSearchResult(deck=deck, cards=matching))
    return results
