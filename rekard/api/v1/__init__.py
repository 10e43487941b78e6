"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from rekard.api.v1.endpoints import decks, cards, study_sessions, search

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(decks.router)
api_router.include_router(cards.router)
api_router.include_router(study_sessions.router)
api_router.include_router(search.router)
