from fastapi import APIRouter, Depends
from rekard.models.enums import Box
from rekard.schemas.deck import BoxTotalsResponse
from rekard.schemas.search import SearchResponse, SearchResultResponse
from rekard.services.deck_store import DeckStore
from rekard.api.v1.endpoints.utils import get_store, card_to_response

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search(q: str = "", store: DeckStore = Depends(get_store)):
    """Search deck names, questions and answers (case-insensitive)."""
    results = store.search(q)
    return SearchResponse(
        query=q,
        results=[
            SearchResultResponse(
                deck_id=result.deck.id,
                deck_name=result.deck.name,
                cards=[card_to_response(card) for card in result.cards]
            )
            for result in results
        ]
    )


@router.get("/stats/boxes", response_model=BoxTotalsResponse)
async def get_box_totals(store: DeckStore = Depends(get_store)):
    """Number of cards per box across all decks."""
    return BoxTotalsResponse(boxes={int(box): store.total_cards_in_box(box) for box in Box})
