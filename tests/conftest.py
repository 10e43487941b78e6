"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from rekard.core.database import create_db_engine, init_db
from rekard.main import create_app
from rekard.models import Card, Deck
from rekard.repositories.deck_repository import SqlDeckRepository
from rekard.services.deck_store import DeckStore

T0 = datetime(2025, 11, 11, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that moves one second forward every time it is read."""

    def __init__(self, start=T0):
        self.now = start

    def __call__(self):
        self.now = self.now + timedelta(seconds=1)
        return self.now


class MemoryRepository:
    """Repository keeping the last saved collection in memory."""

    def __init__(self, decks=None, fail=False):
        self.saved = None
        self.saves = 0
        self.fail = fail
        self._initial = decks or []

    def load_all(self):
        return [d.model_copy(deep=True) for d in self._initial]

    def save_all(self, decks):
        self.saves += 1
        if self.fail:
            return False
        self.saved = [d.model_copy(deep=True) for d in decks]
        return True


@pytest.fixture
def engine():
    """In-memory SQLite engine with tables created."""
    eng = create_db_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def repository(engine):
    return SqlDeckRepository(engine, key="test.decks")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(repository, clock):
    return DeckStore(repository, clock=clock)


@pytest.fixture
def deck(store):
    """Deck with no cards, already added to the store."""
    return store.add_deck(Deck(name="Spanish"))


def make_card(question, box=1, last_reviewed=None, card_id=None):
    kwargs = {"question": question, "answer": f"{question} answer", "box": box,
              "last_reviewed": last_reviewed}
    if card_id is not None:
        kwargs["id"] = card_id
    return Card(**kwargs)


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c
