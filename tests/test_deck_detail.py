"""Tests for the deck detail controller."""
from __future__ import annotations

import dataclasses

import pytest

from study_games.deck_detail import DeckDetail, Presentation
from study_games.models import CardMastery, Flashcard, StudyMode
from study_games.study import ClassicStudy, MatchStudy, QuizStudy


@pytest.fixture
def detail(sample_deck, on_save, on_delete, rng):
    return DeckDetail(sample_deck, on_save, on_delete, rng=rng)


class TestCards:
    def test_add_card(self, detail, on_save):
        before = detail.deck.date_modified
        card = detail.add_card("Nunavut", "Iqaluit")
        assert detail.deck.cards[-1] is card
        assert card.mastery == CardMastery.NEW
        assert detail.deck.date_modified >= before
        assert on_save.calls == 1

    def test_add_closes_sheet(self, detail):
        detail.show_add_card()
        detail.add_card("Nunavut", "Iqaluit")
        assert detail.presented is None

    def test_edit_replaces_by_id(self, detail, on_save):
        original = detail.deck.cards[1]
        updated = dataclasses.replace(original, back="Québec")
        assert detail.edit_card(updated)
        assert detail.deck.cards[1].back == "Québec"
        assert len(detail.deck.cards) == 4
        assert on_save.calls == 1

    def test_add_trims_text(self, detail):
        card = detail.add_card("  Nunavut ", "Iqaluit\n")
        assert (card.front, card.back) == ("Nunavut", "Iqaluit")

    @pytest.mark.parametrize("front,back", [("   ", "Iqaluit"), ("Nunavut", ""), ("\t", "\n")])
    def test_add_refuses_blank(self, detail, on_save, front, back):
        detail.show_add_card()
        assert detail.add_card(front, back) is None
        assert len(detail.deck.cards) == 4
        assert detail.presented == Presentation.ADD_CARD
        assert on_save.calls == 0

    def test_edit_trims_text(self, detail):
        original = detail.deck.cards[1]
        assert detail.edit_card(dataclasses.replace(original, back="  Québec  "))
        assert detail.deck.cards[1].back == "Québec"

    def test_edit_refuses_blank(self, detail, on_save):
        original = detail.deck.cards[1]
        assert not detail.edit_card(dataclasses.replace(original, front="  "))
        assert detail.deck.cards[1].front == "Quebec"
        assert on_save.calls == 0

    def test_edit_unknown_card(self, detail, on_save):
        assert not detail.edit_card(Flashcard("x", "y"))
        assert on_save.calls == 0

    def test_delete_card(self, detail, on_save):
        card_id = detail.deck.cards[0].id
        assert detail.delete_card(card_id)
        assert detail.deck.find_card(card_id) is None
        assert len(detail.deck.cards) == 3
        assert on_save.calls == 1

    def test_delete_missing_card(self, detail, on_save):
        assert not detail.delete_card("missing")
        assert on_save.calls == 0

    def test_delete_deck(self, detail, on_delete):
        detail.request_delete()
        assert detail.presented == Presentation.DELETE_CONFIRM
        detail.confirm_delete()
        assert on_delete.calls == 1
        assert detail.presented is None


class TestPresentation:
    def test_only_one_presented(self, detail):
        detail.show_add_card()
        assert detail.begin_edit(detail.deck.cards[0].id)
        assert detail.presented == Presentation.EDIT_CARD
        detail.request_delete()
        assert detail.presented == Presentation.DELETE_CONFIRM
        assert detail.editing_card_id is None

    def test_begin_edit_unknown(self, detail):
        assert not detail.begin_edit("missing")
        assert detail.presented is None

    def test_study_cleared_on_dismiss(self, detail):
        detail.launch_study(StudyMode.CLASSIC)
        detail.dismiss()
        assert detail.study is None
        assert detail.presented is None


class TestStudyLaunch:
    @pytest.mark.parametrize(
        "mode,cls",
        [(StudyMode.CLASSIC, ClassicStudy), (StudyMode.QUIZ, QuizStudy), (StudyMode.MATCH, MatchStudy)],
    )
    def test_launch_each_mode(self, detail, mode, cls):
        session = detail.launch_study(mode)
        assert isinstance(session, cls)
        assert detail.presented == Presentation.STUDY
        assert detail.study is session

    def test_grades_go_to_on_save_by_default(self, detail, on_save):
        session = detail.launch_study(StudyMode.CLASSIC)
        session.mark_correct()
        assert on_save.calls == 1

    def test_grades_go_to_given_callback(self, detail, on_save):
        graded = []
        session = detail.launch_study(StudyMode.QUIZ, on_grade=graded.append)
        card = session.current
        session.answer(card.back)
        assert graded == [card]
        assert on_save.calls == 0

    def test_empty_deck_cannot_study(self, empty_deck, on_save, on_delete):
        detail = DeckDetail(empty_deck, on_save, on_delete)
        assert not detail.can_study
        assert detail.launch_study(StudyMode.QUIZ) is None
        assert detail.presented is None


class TestAggregates:
    def test_snapshot(self, detail):
        snap = detail.snapshot()
        assert snap["card_count"] == 4
        assert snap["mastery_percentage"] == 25.0
        assert snap["mastery_counts"] == {"new": 1, "learning": 2, "mastered": 1}
        assert snap["can_study"] is True

    def test_aggregates_follow_mutations(self, detail):
        detail.delete_card(detail.deck.cards[0].id)
        assert detail.mastery_percentage == 0.0
        assert detail.mastery_counts()["mastered"] == 0
