"""Tests for the Leitner box transitions."""

import itertools
import random

import pytest

from conftest import T0, make_card
from rekard.models import Box, Judgment, ReviewAction
from rekard.services.leitner_service import (
    apply_review,
    demote_box,
    kind_of_know_box,
    next_box,
    promote_box,
    set_box,
)


def test_promote_box():
    assert promote_box(1) == 2
    assert promote_box(2) == 3
    assert promote_box(3) == 3


def test_demote_box():
    assert demote_box(3) == 2
    assert demote_box(2) == 1
    assert demote_box(1) == 1


@pytest.mark.parametrize("box", [1, 2, 3])
def test_kind_of_know_is_absolute(box):
    assert kind_of_know_box(box) == Box.KIND_OF_KNOW


def test_touch_keeps_box():
    for box in (1, 2, 3):
        assert next_box(box, ReviewAction.TOUCH) == box


def test_promote_in_box_3_still_stamps_review():
    card = make_card("q", box=3)
    apply_review(card, ReviewAction.PROMOTE, T0)
    assert card.box == 3
    assert card.last_reviewed == T0


def test_demote_in_box_1_still_stamps_review():
    card = make_card("q", box=1)
    apply_review(card, ReviewAction.DEMOTE, T0)
    assert card.box == 1
    assert card.last_reviewed == T0


def test_kind_of_know_moves_box_3_down():
    card = make_card("q", box=3)
    apply_review(card, ReviewAction.KIND_OF_KNOW, T0)
    assert card.box == 2


def test_kind_of_know_moves_box_1_up():
    card = make_card("q", box=1)
    apply_review(card, ReviewAction.KIND_OF_KNOW, T0)
    assert card.box == 2


def test_box_stays_in_range_under_random_reviews():
    rng = random.Random(42)
    card = make_card("q")
    actions = [ReviewAction.PROMOTE, ReviewAction.DEMOTE]
    for _ in range(500):
        apply_review(card, rng.choice(actions), T0)
        assert card.box in (1, 2, 3)


def test_box_stays_in_range_for_every_sequence():
    actions = list(ReviewAction)
    for seq in itertools.product(actions, repeat=4):
        card = make_card("q")
        for action in seq:
            apply_review(card, action, T0)
        assert 1 <= card.box <= 3


def test_set_box_clamps_and_keeps_timestamp():
    card = make_card("q", box=2)
    set_box(card, 7)
    assert card.box == 3
    set_box(card, -1)
    assert card.box == 1
    assert card.last_reviewed is None


def test_judgments_map_to_actions():
    assert Judgment.FAIL.action == ReviewAction.DEMOTE
    assert Judgment.PARTIAL.action == ReviewAction.KIND_OF_KNOW
    assert Judgment.PASS.action == ReviewAction.PROMOTE
