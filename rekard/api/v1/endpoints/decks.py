"""
Deck CRUD endpoints.
"""
from fastapi import APIRouter, Depends, Response, status
from uuid import UUID
import logging
from rekard.core.exceptions import ConflictError, NotFoundError
from rekard.models.deck import Deck
from rekard.schemas.deck import (
    DeckResponse,
    DecksResponse,
    CreateDeckRequest,
    UpdateDeckRequest,
    DeckStatsResponse
)
from rekard.services.deck_store import DeckStore
from rekard.api.v1.endpoints.utils import get_store, deck_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=DecksResponse)
async def get_decks(store: DeckStore = Depends(get_store)):
    """Get all decks, most recently created first."""
    return DecksResponse(decks=[deck_to_response(deck) for deck in store.decks])


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
async def create_deck(
    request: CreateDeckRequest,
    store: DeckStore = Depends(get_store)
):
    """Create a new, empty deck."""
    deck = store.add_deck(Deck(name=request.name, icon=request.icon, color=request.color))
    if not deck:
        raise ConflictError("Deck already exists")
    logger.info(f"Created deck {deck.id} ({deck.name})")
    return deck_to_response(deck)


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck(deck_id: UUID, store: DeckStore = Depends(get_store)):
    """Get a deck with its cards."""
    deck = store.get_deck(deck_id)
    if not deck:
        raise NotFoundError("Deck not found")
    return deck_to_response(deck)


@router.put("/{deck_id}", response_model=DeckResponse)
async def update_deck(
    deck_id: UUID,
    request: UpdateDeckRequest,
    store: DeckStore = Depends(get_store)
):
    """Update a deck's name, icon or color."""
    deck = store.get_deck(deck_id)
    if not deck:
        raise NotFoundError("Deck not found")

    # Update fields if provided
    if request.name is not None:
        deck.name = request.name
    if request.icon is not None:
        deck.icon = request.icon
    if request.color is not None:
        deck.color = request.color

    updated = store.update_deck(deck)
    if not updated:
        # Removed between the read and the write
        raise NotFoundError("Deck not found")
    return deck_to_response(updated)


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_deck(deck_id: UUID, store: DeckStore = Depends(get_store)):
    """Delete a deck and all of its cards. Deleting an unknown deck is a no-op."""
    if store.remove_deck(deck_id):
        logger.info(f"Deleted deck {deck_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{deck_id}/stats", response_model=DeckStatsResponse)
async def get_deck_stats(deck_id: UUID, store: DeckStore = Depends(get_store)):
    """Number of cards per box for a deck."""
    counts = store.box_counts(deck_id)
    if counts is None:
        raise NotFoundError("Deck not found")
    return DeckStatsResponse(deck_id=deck_id, total=sum(counts.values()), boxes=counts)
