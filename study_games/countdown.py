"""Challenge-mode countdown driven by an asyncio task."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from study_games.word_builder import WordBuilderGame

log = logging.getLogger("study_games.countdown")


class Countdown:
    def __init__(self, game: WordBuilderGame, interval: float = 1.0):
        self.game = game
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        log.info("Countdown started (%ds)", self.game.time_remaining)

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            log.info("Countdown stopped at %ds", self.game.time_remaining)
        self._task = None

    async def _run(self) -> None:
        try:
            while self.game.timer_active:
                await asyncio.sleep(self.interval)
                if self.game.tick():
                    return
        except asyncio.CancelledError:
            log.debug("Countdown task cancelled")
            raise
