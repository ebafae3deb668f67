from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CardMastery(str, Enum):
    NEW = "new"
    LEARNING = "learning"
    MASTERED = "mastered"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class StudyMode(str, Enum):
    CLASSIC = "classic"
    QUIZ = "quiz"
    MATCH = "match"

    @property
    def label(self) -> str:
        return {
            StudyMode.CLASSIC: "Classic Flip",
            StudyMode.QUIZ: "Quiz Mode",
            StudyMode.MATCH: "Match Mode",
        }[self]


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class RoundState(str, Enum):
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    GAME_OVER = "game_over"


@dataclass
class Flashcard:
    front: str
    back: str
    mastery: CardMastery = CardMastery.NEW
    correct_count: int = 0
    incorrect_count: int = 0
    last_reviewed: datetime | None = None
    next_review: datetime = field(default_factory=_now)
    id: str = field(default_factory=_new_id)

    def __eq__(self, other: object) -> bool:
        # Cards are the same card when their ids match, even after edits.
        if not isinstance(other, Flashcard):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "front": self.front,
            "back": self.back,
            "mastery": self.mastery.value,
            "correct_count": self.correct_count,
            "incorrect_count": self.incorrect_count,
            "last_reviewed": self.last_reviewed.isoformat() if self.last_reviewed else None,
            "next_review": self.next_review.isoformat(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> Flashcard:
        last = d.get("last_reviewed")
        nxt = d.get("next_review")
        return cls(
            id=d.get("id") or _new_id(),
            front=d["front"],
            back=d["back"],
            mastery=CardMastery(d.get("mastery", "new")),
            correct_count=d.get("correct_count", 0),
            incorrect_count=d.get("incorrect_count", 0),
            last_reviewed=datetime.fromisoformat(last) if last else None,
            next_review=datetime.fromisoformat(nxt) if nxt else _now(),
        )


@dataclass
class Deck:
    title: str
    subject: str = ""
    cards: list[Flashcard] = field(default_factory=list)
    date_created: datetime = field(default_factory=_now)
    date_modified: datetime = field(default_factory=_now)
    id: str = field(default_factory=_new_id)

    @property
    def mastery_percentage(self) -> float:
        if not self.cards:
            return 0.0
        mastered = sum(1 for c in self.cards if c.mastery == CardMastery.MASTERED)
        return mastered / len(self.cards) * 100

    def mastery_counts(self) -> dict[str, int]:
        counts = {m.value: 0 for m in CardMastery}
        for c in self.cards:
            counts[c.mastery.value] += 1
        return counts

    def find_card(self, card_id: str) -> int | None:
        """Index of the card with *card_id*, or None."""
        for i, c in enumerate(self.cards):
            if c.id == card_id:
                return i
        return None

    def touch(self) -> None:
        self.date_modified = _now()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "subject": self.subject,
            "cards": [c.to_dict() for c in self.cards],
            "date_created": self.date_created.isoformat(),
            "date_modified": self.date_modified.isoformat(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> Deck:
        created = d.get("date_created")
        modified = d.get("date_modified")
        return cls(
            id=d.get("id") or _new_id(),
            title=d["title"],
            subject=d.get("subject", ""),
            cards=[Flashcard.from_dict(c) for c in d.get("cards", [])],
            date_created=datetime.fromisoformat(created) if created else _now(),
            date_modified=datetime.fromisoformat(modified) if modified else _now(),
        )


@dataclass(frozen=True)
class WordBuilderEntry:
    word: str
    definition: str


@dataclass(frozen=True)
class WordBuilderLetter:
    character: str
    id: str = field(default_factory=_new_id)
