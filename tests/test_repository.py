"""Tests for deck persistence."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from conftest import T0, make_card
from rekard.core.database import create_db_engine
from rekard.models import ColorData, Deck, DeckSnapshot
from rekard.repositories.deck_repository import SqlDeckRepository


def _write_raw(engine, key, payload):
    with Session(engine) as session:
        session.add(DeckSnapshot(key=key, payload=payload))
        session.commit()


def test_load_without_data_is_empty(repository):
    assert repository.load_all() == []


def test_save_then_load(repository):
    deck = Deck(name="Spanish", icon="globe", color=ColorData(red=0.1, green=0.2, blue=0.3, opacity=0.5),
                cards=[make_card("new"), make_card("seen", box=3, last_reviewed=T0)])
    assert repository.save_all([deck]) is True

    loaded = repository.load_all()
    assert loaded == [deck]
    assert loaded[0].cards[1].last_reviewed == T0


def test_save_overwrites(repository):
    repository.save_all([Deck(name="a"), Deck(name="b")])
    repository.save_all([Deck(name="c")])
    assert [d.name for d in repository.load_all()] == ["c"]


def test_malformed_json_yields_empty(engine, repository):
    _write_raw(engine, repository.key, "{not json")
    assert repository.load_all() == []


def test_wrong_shape_yields_empty(engine, repository):
    _write_raw(engine, repository.key, '{"decks": 3}')
    assert repository.load_all() == []


def test_out_of_range_box_is_clamped_on_load(engine, repository):
    deck = Deck(name="d", cards=[make_card("q")])
    payload = deck.model_dump_json().replace('"box":1', '"box":7')
    _write_raw(engine, repository.key, f"[{payload}]")
    assert repository.load_all()[0].cards[0].box == 3


def test_keys_are_separate(engine):
    first = SqlDeckRepository(engine, key="one")
    second = SqlDeckRepository(engine, key="two")
    first.save_all([Deck(name="only in one")])
    assert second.load_all() == []


def test_missing_table_fails_soft():
    engine = create_db_engine("sqlite://")
    repository = SqlDeckRepository(engine, key="k")
    assert repository.load_all() == []
    assert repository.save_all([Deck(name="d")]) is False


def test_database_error_on_save_returns_false(repository):
    with patch("rekard.repositories.deck_repository.Session.commit",
               side_effect=OperationalError("commit", {}, Exception("disk full"))):
        assert repository.save_all([Deck(name="d")]) is False
