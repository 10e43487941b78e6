"""Tests for the study session registry."""

import pytest

from conftest import make_card
from rekard.models import Judgment, SessionState
from rekard.services.session_registry import SessionRegistry


def test_open_get_close(store, deck):
    store.add_card(make_card("q"), deck.id)
    registry = SessionRegistry(store)
    session = registry.open(deck.id, 1)
    assert session.state == SessionState.PRESENTING
    assert registry.get(session.session_id) is session
    assert registry.close(session.session_id) is True
    assert registry.get(session.session_id) is None
    assert registry.close(session.session_id) is False


def test_finished_sessions_close_themselves(store, deck):
    store.add_card(make_card("q"), deck.id)
    registry = SessionRegistry(store)
    session = registry.open(deck.id, 1)
    session.judge(Judgment.PASS)
    assert session.state == SessionState.FINISHED
    assert len(registry) == 0


def test_empty_box_session_is_not_kept(store, deck):
    registry = SessionRegistry(store)
    session = registry.open(deck.id, 2)
    assert session.state == SessionState.FINISHED
    assert registry.get(session.session_id) is None


class Ticker:
    """Monotonic clock moved by hand."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_idle_sessions_expire(store, deck):
    store.add_card(make_card("q"), deck.id)
    ticker = Ticker()
    registry = SessionRegistry(store, idle_timeout=60, clock=ticker)
    stale = registry.open(deck.id, 1)
    ticker.now = 30
    fresh = registry.open(deck.id, 1)

    ticker.now = 61
    assert registry.get(stale.session_id) is None
    assert registry.get(fresh.session_id) is fresh
    assert len(registry) == 1


def test_get_keeps_session_alive(store, deck):
    store.add_card(make_card("q"), deck.id)
    ticker = Ticker()
    registry = SessionRegistry(store, idle_timeout=60, clock=ticker)
    session = registry.open(deck.id, 1)
    for now in (50, 100, 150):
        ticker.now = now
        assert registry.get(session.session_id) is session


def test_full_registry_evicts_least_recently_used(store, deck):
    store.add_card(make_card("q"), deck.id)
    ticker = Ticker()
    registry = SessionRegistry(store, max_sessions=2, clock=ticker)
    first = registry.open(deck.id, 1)
    ticker.now = 1
    second = registry.open(deck.id, 1)
    ticker.now = 2
    registry.get(first.session_id)

    ticker.now = 3
    third = registry.open(deck.id, 1)
    assert len(registry) == 2
    assert registry.get(second.session_id) is None
    assert registry.get(first.session_id) is first
    assert registry.get(third.session_id) is third


def test_registry_never_grows_past_its_cap(store, deck):
    store.add_card(make_card("q"), deck.id)
    registry = SessionRegistry(store, max_sessions=3)
    for _ in range(10):
        registry.open(deck.id, 1)
    assert len(registry) == 3


def test_registry_rejects_zero_capacity(store):
    with pytest.raises(ValueError):
        SessionRegistry(store, max_sessions=0)
