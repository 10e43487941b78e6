"""
Persistence of the deck collection.

The whole collection is stored as a single JSON document and overwritten on
every save. Loading never fails: missing or unreadable data yields an empty
collection.
"""
import logging
from datetime import datetime, timezone
from typing import List, Protocol
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from rekard.core.config import settings
from rekard.core.exceptions import PersistenceError
from rekard.models.deck import Deck
from rekard.models.deck_snapshot import DeckSnapshot

logger = logging.getLogger(__name__)

_decks_adapter = TypeAdapter(List[Deck])


class DeckRepository(Protocol):
    """Load/save collaborator used by the deck store."""

    def load_all(self) -> List[Deck]:
        ...

    def save_all(self, decks: List[Deck]) -> bool:
        ...


def serialize_decks(decks: List[Deck]) -> str:
    try:
        return _decks_adapter.dump_json(decks).decode("utf-8")
    except (PydanticValidationError, ValueError, TypeError) as e:
        raise PersistenceError(f"Failed to serialize decks: {e}") from e


def deserialize_decks(payload: str) -> List[Deck]:
    return _decks_adapter.validate_json(payload)


class SqlDeckRepository:
    """Stores the deck collection as one row of the deck_snapshots table."""

    def __init__(self, engine: Engine, key: str = None):
        self.engine = engine
        self.key = key or settings.storage_key

    def load_all(self) -> List[Deck]:
        try:
            with Session(self.engine) as session:
                snapshot = session.get(DeckSnapshot, self.key)
                payload = snapshot.payload if snapshot else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to read decks for key {self.key}", exc_info=e)
            return []

        if payload is None:
            logger.info(f"No stored decks for key {self.key}, starting empty")
            return []

        try:
            decks = deserialize_decks(payload)
        except PydanticValidationError as e:
            logger.warning(f"Stored decks for key {self.key} are corrupt, starting empty: {e}")
            return []

        logger.info(f"Loaded {len(decks)} deck(s) for key {self.key}")
        return decks

    def save_all(self, decks: List[Deck]) -> bool:
        try:
            payload = serialize_decks(decks)
            with Session(self.engine) as session:
                snapshot = session.get(DeckSnapshot, self.key)
                if snapshot is None:
                    snapshot = DeckSnapshot(key=self.key, payload=payload)
                else:
                    snapshot.payload = payload
                    snapshot.updated_at = datetime.now(timezone.utc)
                session.add(snapshot)
                session.commit()
        except (PersistenceError, SQLAlchemyError) as e:
            # The store keeps its in-memory state; the next successful save re-persists it
            logger.error(f"Failed to save {len(decks)} deck(s) for key {self.key}", exc_info=e)
            return False
        return True
