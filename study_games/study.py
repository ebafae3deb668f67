"""Study modes launched from a deck: classic flip, typed quiz and matching.

Each session works on the deck's own Flashcard objects, so mastery updates
land in the deck directly; ``on_grade`` is called with each graded card.
"""
from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from study_games.models import CardMastery, Deck, Flashcard, StudyMode

# Correct answers needed before a card counts as mastered.
MASTERY_THRESHOLD = 3

MASTERED_REVIEW_DELAY = timedelta(days=7)
LEARNING_REVIEW_DELAY = timedelta(days=1)
MISSED_REVIEW_DELAY = timedelta(minutes=10)

_MASTERY_ORDER = {CardMastery.NEW: 0, CardMastery.LEARNING: 1, CardMastery.MASTERED: 2}


def _noop(card: Flashcard) -> None:
    pass


def study_order(cards: list[Flashcard]) -> list[Flashcard]:
    """New cards first, then learning, then mastered; earliest due first within each."""
    return sorted(cards, key=lambda c: (_MASTERY_ORDER[c.mastery], c.next_review))


def grade_card(
    card: Flashcard,
    correct: bool,
    now: datetime | None = None,
    schedule: bool = True,
) -> None:
    """Apply a graded answer to *card*'s counters and mastery.

    With *schedule* the card's next review moves too; the quiz grades
    without rescheduling.
    """
    now = now or datetime.now(timezone.utc)
    card.last_reviewed = now
    if correct:
        card.correct_count += 1
        if card.correct_count >= MASTERY_THRESHOLD:
            card.mastery = CardMastery.MASTERED
            delay = MASTERED_REVIEW_DELAY
        else:
            card.mastery = CardMastery.LEARNING
            delay = LEARNING_REVIEW_DELAY
    else:
        card.incorrect_count += 1
        card.mastery = CardMastery.LEARNING
        delay = MISSED_REVIEW_DELAY
    if schedule:
        card.next_review = now + delay


def answers_match(answer: str, expected: str) -> bool:
    return answer.strip().lower() == expected.strip().lower()


class ClassicStudy:
    mode = StudyMode.CLASSIC

    def __init__(self, deck: Deck, on_grade: Callable[[Flashcard], None] = _noop):
        self.deck = deck
        self.on_grade = on_grade
        self.cards = study_order(deck.cards)
        self.index = 0
        self.flipped = False
        self.correct = 0
        self.incorrect = 0
        self.is_complete = not self.cards

    @property
    def current(self) -> Flashcard | None:
        if self.is_complete:
            return None
        return self.cards[self.index]

    def flip(self) -> None:
        self.flipped = not self.flipped

    def mark_correct(self) -> bool:
        return self._mark(True)

    def mark_incorrect(self) -> bool:
        return self._mark(False)

    def _mark(self, correct: bool) -> bool:
        card = self.current
        if card is None:
            return False
        grade_card(card, correct)
        if correct:
            self.correct += 1
        else:
            self.incorrect += 1
        self.on_grade(card)
        self._advance()
        return True

    def _advance(self) -> None:
        self.flipped = False
        if self.index + 1 >= len(self.cards):
            self.is_complete = True
        else:
            self.index += 1

    def snapshot(self) -> dict:
        card = self.current
        return {
            "mode": self.mode.value,
            "position": self.index + 1,
            "total": len(self.cards),
            "card": card.to_dict() if card else None,
            "flipped": self.flipped,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "is_complete": self.is_complete,
        }


class QuizStudy:
    mode = StudyMode.QUIZ

    def __init__(
        self,
        deck: Deck,
        on_grade: Callable[[Flashcard], None] = _noop,
        rng: random.Random | None = None,
    ):
        self.deck = deck
        self.on_grade = on_grade
        self.cards = list(deck.cards)
        (rng or random.Random()).shuffle(self.cards)
        self.index = 0
        self.score = 0
        self.answered = False
        self.last_correct = False
        self.is_complete = not self.cards

    @property
    def current(self) -> Flashcard | None:
        if self.is_complete:
            return None
        return self.cards[self.index]

    def answer(self, text: str) -> bool | None:
        """Grade a typed answer against the card's back. None if not answerable."""
        card = self.current
        if card is None or self.answered:
            return None
        correct = answers_match(text, card.back)
        if correct:
            self.score += 1
        grade_card(card, correct, schedule=False)
        self.on_grade(card)
        self.answered = True
        self.last_correct = correct
        return correct

    def next(self) -> bool:
        if not self.answered:
            return False
        self.answered = False
        self.last_correct = False
        if self.index + 1 >= len(self.cards):
            self.is_complete = True
        else:
            self.index += 1
        return True

    def snapshot(self) -> dict:
        card = self.current
        return {
            "mode": self.mode.value,
            "position": self.index + 1,
            "total": len(self.cards),
            "prompt": card.front if card else None,
            "answer": card.back if card and self.answered else None,
            "answered": self.answered,
            "last_correct": self.last_correct,
            "score": self.score,
            "is_complete": self.is_complete,
        }


class MatchStudy:
    mode = StudyMode.MATCH

    def __init__(
        self,
        deck: Deck,
        rng: random.Random | None = None,
        pairs: int = 8,
    ):
        rng = rng or random.Random()
        self.deck = deck
        cards = list(deck.cards[:pairs])
        self.fronts = [(c.id, c.front) for c in cards]
        self.backs = [(c.id, c.back) for c in cards]
        rng.shuffle(self.fronts)
        rng.shuffle(self.backs)
        self.selected_front: str | None = None
        self.selected_back: str | None = None
        self.matched: set[str] = set()
        self.attempts = 0
        self.wrong_pair = False

    @property
    def is_complete(self) -> bool:
        return len(self.matched) == len(self.fronts)

    def select_front(self, card_id: str) -> bool | None:
        if card_id in self.matched or card_id not in {i for i, _ in self.fronts}:
            return None
        self.selected_front = card_id
        return self._check()

    def select_back(self, card_id: str) -> bool | None:
        if card_id in self.matched or card_id not in {i for i, _ in self.backs}:
            return None
        self.selected_back = card_id
        return self._check()

    def _check(self) -> bool | None:
        """Compare once both sides are chosen; None while waiting for the other side."""
        self.wrong_pair = False
        if self.selected_front is None or self.selected_back is None:
            return None
        self.attempts += 1
        matched = self.selected_front == self.selected_back
        if matched:
            self.matched.add(self.selected_front)
        else:
            self.wrong_pair = True
        self.selected_front = None
        self.selected_back = None
        return matched

    def snapshot(self) -> dict:
        return {
            "mode": self.mode.value,
            "fronts": [{"id": i, "text": t} for i, t in self.fronts],
            "backs": [{"id": i, "text": t} for i, t in self.backs],
            "matched": sorted(self.matched),
            "selected_front": self.selected_front,
            "selected_back": self.selected_back,
            "attempts": self.attempts,
            "wrong_pair": self.wrong_pair,
            "is_complete": self.is_complete,
        }


StudySession = ClassicStudy | QuizStudy | MatchStudy


def start_study(
    mode: StudyMode,
    deck: Deck,
    on_grade: Callable[[Flashcard], None] = _noop,
    rng: random.Random | None = None,
    match_pairs: int = 8,
) -> StudySession:
    mode = StudyMode(mode)
    if mode == StudyMode.CLASSIC:
        return ClassicStudy(deck, on_grade)
    if mode == StudyMode.QUIZ:
        return QuizStudy(deck, on_grade, rng=rng)
    return MatchStudy(deck, rng=rng, pairs=match_pairs)
