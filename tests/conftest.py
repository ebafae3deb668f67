"""Shared test fixtures."""
from __future__ import annotations

import random

import pytest

from study_games.db import Database
from study_games.models import CardMastery, Deck, Flashcard


@pytest.fixture
def tmp_db(tmp_path):
    """Create a fresh temporary database."""
    db = Database(tmp_path / "test.db")
    yield db
    db.close()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sample_cards():
    """Cards covering every mastery level."""
    return [
        Flashcard("Ontario", "Toronto", mastery=CardMastery.MASTERED, correct_count=3),
        Flashcard("Quebec", "Quebec City", mastery=CardMastery.LEARNING, correct_count=1),
        Flashcard("Alberta", "Edmonton"),
        Flashcard("Yukon", "Whitehorse", mastery=CardMastery.LEARNING, incorrect_count=2),
    ]


@pytest.fixture
def sample_deck(sample_cards):
    return Deck(title="Provinces", subject="Geography", cards=sample_cards)


@pytest.fixture
def empty_deck():
    return Deck(title="Empty", subject="Math")


class Recorder:
    """Counts callback invocations and keeps their arguments."""

    def __init__(self):
        self.calls = 0
        self.args = []

    def __call__(self, *args):
        self.calls += 1
        self.args.append(args)


@pytest.fixture
def on_save():
    return Recorder()


@pytest.fixture
def on_delete():
    return Recorder()
