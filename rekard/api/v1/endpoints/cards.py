"""
Card endpoints: CRUD within a deck, due sets and Leitner transitions.
"""
from fastapi import APIRouter, Depends, Path, Response, status
from uuid import UUID
import logging
from rekard.core.exceptions import NotFoundError
from rekard.models.card import Card
from rekard.schemas.card import (
    CardResponse,
    CardsResponse,
    CreateCardRequest,
    UpdateCardRequest,
    ReviewRequest,
    SetBoxRequest,
    ReviewResultResponse
)
from rekard.services.deck_store import DeckStore
from rekard.api.v1.endpoints.utils import get_store, card_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks/{deck_id}", tags=["cards"])


def _result(card) -> ReviewResultResponse:
    if card is None:
        return ReviewResultResponse(applied=False)
    return ReviewResultResponse(applied=True, card=card_to_response(card))


@router.get("/cards", response_model=CardsResponse)
async def get_cards(deck_id: UUID, store: DeckStore = Depends(get_store)):
    """Get the cards of a deck, newest first."""
    deck = store.get_deck(deck_id)
    if not deck:
        raise NotFoundError("Deck not found")
    return CardsResponse(cards=[card_to_response(card) for card in deck.cards])


@router.post("/cards", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(
    deck_id: UUID,
    request: CreateCardRequest,
    store: DeckStore = Depends(get_store)
):
    """Add a card to the front of a deck. New cards start in box 1, never reviewed."""
    card = store.add_card(Card(question=request.question, answer=request.answer), deck_id)
    if not card:
        raise NotFoundError("Deck not found")
    return card_to_response(card)


@router.put("/cards/{card_id}", response_model=CardResponse)
async def update_card(
    deck_id: UUID,
    card_id: UUID,
    request: UpdateCardRequest,
    store: DeckStore = Depends(get_store)
):
    """Edit the question and/or answer of a card; box and review time are kept."""
    card = store.get_card(card_id, deck_id)
    if not card:
        raise NotFoundError("Card not found")

    if request.question is not None:
        card.question = request.question
    if request.answer is not None:
        card.answer = request.answer

    updated = store.update_card(card, deck_id)
    if not updated:
        raise NotFoundError("Card not found")
    return card_to_response(updated)


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(deck_id: UUID, card_id: UUID, store: DeckStore = Depends(get_store)):
    """Delete a card. Deleting an unknown card is a no-op."""
    store.remove_card(card_id, deck_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/boxes/{box}/due", response_model=CardsResponse)
async def get_due_cards(
    deck_id: UUID,
    box: int = Path(..., ge=1, le=3),
    store: DeckStore = Depends(get_store)
):
    """
    Get the study queue for a box: never-reviewed cards first, then oldest review first.

    An unknown deck yields an empty queue.
    """
    return CardsResponse(cards=[card_to_response(card) for card in store.due_cards(deck_id, box)])


@router.post("/cards/{card_id}/review", response_model=ReviewResultResponse)
async def review_card(
    deck_id: UUID,
    card_id: UUID,
    request: ReviewRequest,
    store: DeckStore = Depends(get_store)
):
    """
    Apply a review to a card.

    Accepts either a raw action (promote, demote, kind_of_know, touch) or a
    judgment (fail, partial, pass). A card that no longer exists is ignored
    and reported with applied=false.
    """
    card = store.review(card_id, deck_id, request.resolved_action)
    return _result(card)


@router.put("/cards/{card_id}/box", response_model=ReviewResultResponse)
async def set_card_box(
    deck_id: UUID,
    card_id: UUID,
    request: SetBoxRequest,
    store: DeckStore = Depends(get_store)
):
    """Move a card to a box without recording a review."""
    card = store.set_box(card_id, deck_id, request.box)
    return _result(card)
