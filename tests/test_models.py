"""Tests for the card and deck models."""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from rekard.models import Card, ColorData, Deck, ReviewedAt, Unreviewed, due_order_key


def test_new_card_defaults():
    card = Card(question="Q", answer="A")
    assert card.box == 1
    assert card.last_reviewed is None
    assert isinstance(card.id, uuid.UUID)
    assert card.review_state == Unreviewed()


def test_box_clamped_on_creation():
    assert Card(question="Q", answer="A", box=0).box == 1
    assert Card(question="Q", answer="A", box=9).box == 3


def test_box_clamped_on_assignment():
    card = Card(question="Q", answer="A")
    card.box = 4
    assert card.box == 3
    card.box = -2
    assert card.box == 1


def test_naive_timestamp_treated_as_utc():
    card = Card(question="Q", answer="A", last_reviewed=datetime(2025, 1, 1, 12, 0))
    assert card.last_reviewed.tzinfo == timezone.utc
    assert card.review_state == ReviewedAt(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))


def test_unreviewed_sorts_before_reviewed():
    old = Card(question="Q", answer="A", last_reviewed=datetime(2000, 1, 1, tzinfo=timezone.utc))
    new = Card(question="Q", answer="A")
    assert due_order_key(new) < due_order_key(old)


def test_deck_defaults():
    deck = Deck(name="Deck")
    assert deck.icon == "book.fill"
    assert deck.color == ColorData(red=0.85, green=0.45, blue=0.45, opacity=1.0)
    assert deck.cards == []


def test_color_channels_must_be_in_unit_range():
    with pytest.raises(ValidationError):
        ColorData(red=1.5, green=0.0, blue=0.0)


def test_deck_card_helpers():
    a = Card(question="a", answer="a", box=1)
    b = Card(question="b", answer="b", box=2)
    deck = Deck(name="Deck", cards=[a, b])
    assert deck.card_index(b.id) == 1
    assert deck.card_index(uuid.uuid4()) is None
    assert deck.cards_in_box(2) == [b]
    assert deck.has_unique_card_ids()
    assert not Deck(name="Deck", cards=[a, a.model_copy()]).has_unique_card_ids()


def test_ids_cannot_be_reassigned():
    card = Card(question="Q", answer="A")
    deck = Deck(name="Deck")
    with pytest.raises(ValidationError):
        card.id = uuid.uuid4()
    with pytest.raises(ValidationError):
        deck.id = uuid.uuid4()
    assert card.model_copy(update={"question": "R"}).id == card.id
