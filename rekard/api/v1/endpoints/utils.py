"""
Shared dependencies and response builders for endpoint operations.
"""
from fastapi import Request
from rekard.models.card import Card
from rekard.models.deck import Deck
from rekard.schemas.card import CardResponse
from rekard.schemas.deck import DeckResponse
from rekard.schemas.study_session import CurrentCardResponse, StudySessionResponse
from rekard.services.deck_store import DeckStore
from rekard.services.session_registry import SessionRegistry
from rekard.services.study_session import StudySession


def get_store(request: Request) -> DeckStore:
    """Dependency returning the application's deck store."""
    return request.app.state.store


def get_session_registry(request: Request) -> SessionRegistry:
    """Dependency returning the application's study session registry."""
    return request.app.state.sessions


def card_to_response(card: Card) -> CardResponse:
    return CardResponse.model_validate(card)


def deck_to_response(deck: Deck) -> DeckResponse:
    return DeckResponse.model_validate(deck)


def session_to_response(session: StudySession) -> StudySessionResponse:
    """
    Build the session view sent to clients.

    The answer of the current card is only included once it has been revealed.
    """
    card = session.current_card
    current = None
    if card is not None:
        current = CurrentCardResponse(
            id=card.id,
            question=card.question,
            answer=card.answer if session.is_revealed else None,
            box=card.box,
        )
    return StudySessionResponse(
        session_id=session.session_id,
        deck_id=session.deck_id,
        box=session.box,
        state=session.state,
        index=session.index,
        total=len(session.cards),
        remaining=session.remaining,
        reviewed=session.reviewed,
        current_card=current,
    )
