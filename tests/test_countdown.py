"""Tests for the challenge countdown task."""
from __future__ import annotations

import asyncio

import pytest

from study_games.countdown import Countdown
from study_games.models import RoundState
from study_games.word_builder import WordBuilderGame


@pytest.fixture
def challenge_game(rng):
    g = WordBuilderGame(rng=rng, challenge_seconds=3)
    g.load_new_word()
    g.set_challenge_mode(True)
    return g


class TestCountdown:
    @pytest.mark.asyncio
    async def test_runs_to_game_over(self, challenge_game):
        cd = Countdown(challenge_game, interval=0.01)
        cd.start()
        await asyncio.wait_for(cd._task, timeout=2)
        assert challenge_game.state == RoundState.GAME_OVER
        assert challenge_game.time_remaining == 0
        assert not cd.running

    @pytest.mark.asyncio
    async def test_stop_freezes_time(self, challenge_game):
        cd = Countdown(challenge_game, interval=10)
        cd.start()
        await asyncio.sleep(0)
        cd.stop()
        assert not cd.running
        assert challenge_game.time_remaining == 3
        assert challenge_game.state == RoundState.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_start_idempotent(self, challenge_game):
        cd = Countdown(challenge_game, interval=10)
        cd.start()
        task = cd._task
        cd.start()
        assert cd._task is task
        cd.stop()

    @pytest.mark.asyncio
    async def test_exits_when_challenge_disabled(self, challenge_game):
        cd = Countdown(challenge_game, interval=0.01)
        cd.start()
        challenge_game.set_challenge_mode(False)
        await asyncio.wait_for(cd._task, timeout=2)
        assert challenge_game.state == RoundState.IN_PROGRESS
        assert challenge_game.time_remaining >= 2
