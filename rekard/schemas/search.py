"""
Search schemas.
"""
from pydantic import BaseModel
from typing import List
from uuid import UUID
from rekard.schemas.card import CardResponse


class SearchResultResponse(BaseModel):
    """One deck matching a search, with its matching cards."""
    deck_id: UUID
    deck_name: str
    cards: List[CardResponse]


class SearchResponse(BaseModel):
    """Response schema for a search."""
    query: str
    results: List[SearchResultResponse]
