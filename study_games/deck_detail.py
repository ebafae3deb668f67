"""Deck detail screen: card editing and study-mode launching for one deck.

The deck is owned by the caller; this controller mutates it in place and
reports through ``on_save`` / ``on_delete``. Card text is trimmed and cards
with a blank side are refused.
"""
from __future__ import annotations

import dataclasses
import logging
import random
from collections.abc import Callable
from enum import Enum

from study_games.models import Deck, Flashcard, StudyMode
from study_games.study import StudySession, start_study

log = logging.getLogger("study_games.decks")


class Presentation(str, Enum):
    ADD_CARD = "add_card"
    EDIT_CARD = "edit_card"
    STUDY = "study"
    DELETE_CONFIRM = "delete_confirm"


class DeckDetail:
    def __init__(
        self,
        deck: Deck,
        on_save: Callable[[], None],
        on_delete: Callable[[], None],
        rng: random.Random | None = None,
        match_pairs: int = 8,
    ):
        self.deck = deck
        self.on_save = on_save
        self.on_delete = on_delete
        self.rng = rng
        self.match_pairs = match_pairs
        # A single field, so at most one sheet/cover/alert is ever up.
        self.presented: Presentation | None = None
        self.editing_card_id: str | None = None
        self.study: StudySession | None = None

    # ── Presentation ──────────────────────────────────────────────────────

    def _present(self, what: Presentation | None) -> None:
        self.presented = what
        if what != Presentation.EDIT_CARD:
            self.editing_card_id = None
        if what != Presentation.STUDY:
            self.study = None

    def show_add_card(self) -> None:
        self._present(Presentation.ADD_CARD)

    def begin_edit(self, card_id: str) -> bool:
        if self.deck.find_card(card_id) is None:
            return False
        self._present(Presentation.EDIT_CARD)
        self.editing_card_id = card_id
        return True

    def request_delete(self) -> None:
        self._present(Presentation.DELETE_CONFIRM)

    def dismiss(self) -> None:
        self._present(None)

    # ── Cards ─────────────────────────────────────────────────────────────

    def add_card(self, front: str, back: str) -> Flashcard | None:
        """Append a card; None when either side is blank after trimming."""
        front, back = front.strip(), back.strip()
        if not front or not back:
            return None
        card = Flashcard(front=front, back=back)
        self.deck.cards.append(card)
        self.deck.touch()
        self.on_save()
        if self.presented == Presentation.ADD_CARD:
            self.dismiss()
        log.info("Deck %s: added card %s", self.deck.id, card.id)
        return card

    def edit_card(self, card: Flashcard) -> bool:
        idx = self.deck.find_card(card.id)
        if idx is None:
            return False
        front, back = card.front.strip(), card.back.strip()
        if not front or not back:
            return False
        self.deck.cards[idx] = dataclasses.replace(card, front=front, back=back)
        self.deck.touch()
        self.on_save()
        if self.presented == Presentation.EDIT_CARD:
            self.dismiss()
        return True

    def delete_card(self, card_id: str) -> bool:
        idx = self.deck.find_card(card_id)
        if idx is None:
            return False
        del self.deck.cards[idx]
        self.on_save()
        log.info("Deck %s: deleted card %s", self.deck.id, card_id)
        return True

    def confirm_delete(self) -> None:
        self.dismiss()
        log.info("Deck %s: deleting deck", self.deck.id)
        self.on_delete()

    # ── Study ─────────────────────────────────────────────────────────────

    @property
    def can_study(self) -> bool:
        return bool(self.deck.cards)

    def launch_study(
        self,
        mode: StudyMode,
        on_grade: Callable[[Flashcard], None] | None = None,
    ) -> StudySession | None:
        """Open a study session; graded cards go to *on_grade*, else ``on_save``."""
        if not self.can_study:
            return None
        on_grade = on_grade or (lambda card: self.on_save())
        session = start_study(
            mode, self.deck, on_grade, rng=self.rng, match_pairs=self.match_pairs
        )
        self._present(Presentation.STUDY)
        self.study = session
        return session

    # ── Aggregates ────────────────────────────────────────────────────────

    @property
    def mastery_percentage(self) -> float:
        return self.deck.mastery_percentage

    def mastery_counts(self) -> dict[str, int]:
        return self.deck.mastery_counts()

    def snapshot(self) -> dict:
        data = self.deck.to_dict()
        data["mastery_percentage"] = round(self.mastery_percentage, 1)
        data["mastery_counts"] = self.mastery_counts()
        data["card_count"] = len(self.deck.cards)
        data["can_study"] = self.can_study
        return data
