"""Word Builder: unscramble a word from a rack of letter tiles.

Round flow: LOADING -> IN_PROGRESS -> CORRECT | INCORRECT -> next round,
with GAME_OVER reachable at any point when the challenge countdown hits zero.

Scoring for a correct word:
    max(5, 10 * len(word) + speed_bonus + hint_penalty + 5 * streak)
speed_bonus is 20 in challenge mode with more than 30s left, 10 with 30s or
less, 0 outside challenge mode. hint_penalty is -15 if any hint was used.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from study_games.models import Difficulty, RoundState, WordBuilderLetter
from study_games.word_lists import words_for

if TYPE_CHECKING:
    from study_games.db import Database

log = logging.getLogger("study_games.word_builder")

HIGH_SCORE_KEY = "word_builder_high_score"
BEST_STREAK_KEY = "word_builder_best_streak"

CHALLENGE_SECONDS = 60
BASE_POINTS_PER_LETTER = 10
MIN_WORD_POINTS = 5
HINT_PENALTY = -15
STREAK_BONUS = 5


def pick_word_index(count: int, used: set[int], rng: random.Random) -> int:
    """Pick an index not yet in *used*, starting a new cycle when all are used.

    Mutates *used* to record the pick.
    """
    if len(used) >= count:
        used.clear()
    available = [i for i in range(count) if i not in used]
    index = rng.choice(available)
    used.add(index)
    return index


def scramble(word: str, rng: random.Random) -> list[WordBuilderLetter]:
    """Shuffle the letters of *word* into rack tiles.

    Reshuffles once if the result spells the word in order. This is a single
    retry, so an in-order rack is unlikely but possible.
    """
    letters = [WordBuilderLetter(ch) for ch in word]
    rack = letters[:]
    rng.shuffle(rack)
    if [t.character for t in rack] == list(word):
        rng.shuffle(rack)
    return rack


def speed_bonus(challenge_mode: bool, time_remaining: int) -> int:
    if not challenge_mode:
        return 0
    return 20 if time_remaining > 30 else 10


def score_for_word(
    word_length: int,
    streak: int,
    hint_used: bool = False,
    challenge_mode: bool = False,
    time_remaining: int = CHALLENGE_SECONDS,
) -> int:
    """Points for a correct answer. *streak* is the streak before this word."""
    points = (
        BASE_POINTS_PER_LETTER * word_length
        + speed_bonus(challenge_mode, time_remaining)
        + (HINT_PENALTY if hint_used else 0)
        + STREAK_BONUS * streak
    )
    return max(MIN_WORD_POINTS, points)


@dataclass
class CheckResult:
    correct: bool
    points: int
    word: str
    shake: bool = False
    new_high_score: bool = False


class WordBuilderGame:
    """Session state and actions for one Word Builder screen.

    Every action method is synchronous and returns whether it applied, so a
    renderer can disable controls by asking the same questions.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        store: Database | None = None,
        rng: random.Random | None = None,
        challenge_seconds: int = CHALLENGE_SECONDS,
    ):
        self.difficulty = Difficulty(difficulty)
        self.store = store
        self.rng = rng or random.Random()
        self.challenge_seconds = challenge_seconds

        self.state = RoundState.LOADING
        self.current_word = ""
        self.current_definition = ""
        self.rack: list[WordBuilderLetter] = []
        self.placed: list[WordBuilderLetter] = []
        self.score = 0
        self.streak = 0
        self.words_completed = 0
        self.hint_used = False
        self.definition_shown = False
        self.shake = False
        self.last_result: CheckResult | None = None
        self.used_indices: set[int] = set()

        self.challenge_mode = False
        self.timer_active = False
        self.time_remaining = challenge_seconds

        self.high_score = store.get_int(HIGH_SCORE_KEY) if store else 0
        self.best_streak = store.get_int(BEST_STREAK_KEY) if store else 0

    # ── Rounds ────────────────────────────────────────────────────────────

    def load_new_word(self) -> None:
        words = words_for(self.difficulty)
        self.state = RoundState.LOADING
        index = pick_word_index(len(words), self.used_indices, self.rng)
        entry = words[index]
        self.current_word = entry.word.lower()
        self.current_definition = entry.definition
        self.rack = scramble(self.current_word, self.rng)
        self.placed = []
        self.hint_used = False
        self.definition_shown = False
        self.shake = False
        self.last_result = None
        self.state = RoundState.IN_PROGRESS
        log.debug("Round loaded: %s word #%d", self.difficulty.value, index)

    def next_word(self) -> bool:
        if self.state not in (RoundState.CORRECT, RoundState.INCORRECT):
            return False
        self.load_new_word()
        return True

    @property
    def in_progress(self) -> bool:
        return self.state == RoundState.IN_PROGRESS

    @property
    def game_over(self) -> bool:
        return self.state == RoundState.GAME_OVER

    # ── Tiles ─────────────────────────────────────────────────────────────

    def place_letter(self, letter_id: str) -> bool:
        """Move a rack tile to the next open slot."""
        if not self.in_progress:
            return False
        for i, tile in enumerate(self.rack):
            if tile.id == letter_id:
                self.placed.append(self.rack.pop(i))
                return True
        return False

    def return_letter(self, letter_id: str) -> bool:
        """Move a placed tile back to the rack."""
        if not self.in_progress:
            return False
        for i, tile in enumerate(self.placed):
            if tile.id == letter_id:
                self.rack.append(self.placed.pop(i))
                return True
        return False

    def shuffle_rack(self) -> bool:
        if not self.in_progress or not self.rack:
            return False
        self.rng.shuffle(self.rack)
        return True

    def clear_board(self) -> bool:
        if not self.in_progress or not self.placed:
            return False
        self._clear()
        return True

    def _clear(self) -> None:
        self.rack.extend(self.placed)
        self.placed = []
        self.rng.shuffle(self.rack)

    # ── Hints ─────────────────────────────────────────────────────────────

    @property
    def can_reveal_first_letter(self) -> bool:
        return self.in_progress and not self.hint_used and not self.placed

    def reveal_first_letter(self) -> bool:
        if not self.can_reveal_first_letter or not self.current_word:
            return False
        first = self.current_word[0]
        self.hint_used = True
        self._clear()
        for i, tile in enumerate(self.rack):
            if tile.character == first:
                self.placed.append(self.rack.pop(i))
                break
        return True

    def reveal_definition(self) -> bool:
        if not self.in_progress or self.definition_shown:
            return False
        self.definition_shown = True
        self.hint_used = True
        return True

    # ── Checking ──────────────────────────────────────────────────────────

    @property
    def attempt(self) -> str:
        return "".join(t.character for t in self.placed)

    @property
    def can_check(self) -> bool:
        return self.in_progress and len(self.placed) == len(self.current_word)

    def check_word(self) -> CheckResult | None:
        if not self.can_check:
            return None
        correct = self.attempt.lower() == self.current_word.lower()
        if correct:
            points = score_for_word(
                len(self.current_word),
                self.streak,
                hint_used=self.hint_used,
                challenge_mode=self.challenge_mode,
                time_remaining=self.time_remaining,
            )
            self.score += points
            self.streak += 1
            self.words_completed += 1
            new_high = self._record_bests()
            self.state = RoundState.CORRECT
            result = CheckResult(True, points, self.current_word, new_high_score=new_high)
            log.info("Correct: %s (+%d, streak %d)", self.current_word, points, self.streak)
        else:
            self.streak = 0
            self.shake = True
            self.state = RoundState.INCORRECT
            result = CheckResult(False, 0, self.current_word, shake=True)
            log.info("Incorrect: %r for %s", self.attempt, self.current_word)
        self.last_result = result
        return result

    def _record_bests(self) -> bool:
        new_high = False
        if self.streak > self.best_streak:
            self.best_streak = self.streak
            if self.store:
                self.store.set_int(BEST_STREAK_KEY, self.best_streak)
        if self.score > self.high_score:
            self.high_score = self.score
            new_high = True
            if self.store:
                self.store.set_int(HIGH_SCORE_KEY, self.high_score)
            log.info("New high score: %d", self.high_score)
        return new_high

    @property
    def is_new_high_score(self) -> bool:
        return self.score >= self.high_score and self.score > 0

    # ── Challenge mode ────────────────────────────────────────────────────

    def set_challenge_mode(self, enabled: bool) -> None:
        """Toggle the timed mode. A finished game keeps its clock stopped until reset()."""
        self.challenge_mode = enabled
        if enabled and self.game_over:
            return
        if enabled:
            self.time_remaining = self.challenge_seconds
            self.timer_active = True
        else:
            self.timer_active = False

    def tick(self) -> bool:
        """Advance the countdown by one second.

        Returns True only on the tick that ends the game.
        """
        if not (self.challenge_mode and self.timer_active and self.time_remaining > 0):
            return False
        self.time_remaining -= 1
        if self.time_remaining <= 0:
            self.state = RoundState.GAME_OVER
            self.timer_active = False
            log.info("Time's up: score %d, %d words", self.score, self.words_completed)
            return True
        return False

    # ── Session ───────────────────────────────────────────────────────────

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = Difficulty(difficulty)
        self.reset()

    def reset(self) -> None:
        self.score = 0
        self.streak = 0
        self.words_completed = 0
        self.used_indices.clear()
        if self.challenge_mode:
            self.time_remaining = self.challenge_seconds
            self.timer_active = True
        self.load_new_word()

    def snapshot(self) -> dict:
        """JSON-safe view of the game. The answer is hidden mid-round."""
        resolved = self.state in (RoundState.CORRECT, RoundState.INCORRECT, RoundState.GAME_OVER)
        result = None
        if self.last_result is not None:
            result = {
                "correct": self.last_result.correct,
                "points": self.last_result.points,
                "shake": self.last_result.shake,
                "new_high_score": self.last_result.new_high_score,
            }
        return {
            "state": self.state.value,
            "difficulty": self.difficulty.value,
            "word_length": len(self.current_word),
            "word": self.current_word if resolved else None,
            "definition": self.current_definition if self.definition_shown or resolved else None,
            "rack": [{"id": t.id, "character": t.character} for t in self.rack],
            "placed": [{"id": t.id, "character": t.character} for t in self.placed],
            "score": self.score,
            "streak": self.streak,
            "words_completed": self.words_completed,
            "high_score": self.high_score,
            "best_streak": self.best_streak,
            "hint_used": self.hint_used,
            "can_reveal_first_letter": self.can_reveal_first_letter,
            "can_check": self.can_check,
            "challenge_mode": self.challenge_mode,
            "timer_active": self.timer_active,
            "time_remaining": self.time_remaining,
            "is_new_high_score": self.game_over and self.is_new_high_score,
            "result": result,
        }
