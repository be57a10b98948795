"""Core gameplay logic: click handling, per-frame updates, win/lose."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable

from backend.config import GameConfig
from backend.engine.gameplay.presenter import (
    CellView,
    GameSnapshot,
    NullPresenter,
    Presenter,
)
from backend.engine.gamestate import GameState, Phase
from backend.errors import IllegalTransition
from backend.models.grid import Grid
from backend.models.highscore import HighScoreStore
from backend.models.layout import Layout

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


# Every phase may also fall back to MENU via quit_to_menu().
_TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.MENU: frozenset({Phase.PLAYING}),
    Phase.PLAYING: frozenset({Phase.WON, Phase.LOST, Phase.MENU}),
    Phase.WON: frozenset({Phase.PLAYING, Phase.MENU}),
    Phase.LOST: frozenset({Phase.PLAYING, Phase.MENU}),
}


class MemoryGame:
    """Owns one player's grid, session and high score.

    Frontends feed it pointer clicks and per-frame ticks, and read a
    ``GameSnapshot`` back to draw.  ``now`` arguments are milliseconds
    on the same clock as *clock*; omit them to read the clock.
    """

    def __init__(
        self,
        store: HighScoreStore | None = None,
        *,
        config: GameConfig | None = None,
        layout: Layout | None = None,
        presenter: Presenter | None = None,
        clock: Clock = monotonic_ms,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.layout = layout or Layout()
        self.presenter: Presenter = presenter or NullPresenter()
        self._store = store
        self._clock = clock
        self._rng = rng

        self.phase = Phase.MENU
        self.high_score: int = store.load() if store is not None else 0
        self.new_record = False
        self.state = GameState(Grid(), started_at=0)

        self._click_handlers: dict[Phase, Callable[[int, int, int], bool]] = {
            Phase.MENU: self._click_menu,
            Phase.PLAYING: self._click_playing,
            Phase.WON: self._click_result,
            Phase.LOST: self._click_result,
        }

    # -- input ----------------------------------------------------------------

    def on_pointer_down(self, x: int, y: int, now: int | None = None) -> bool:
        """Handle a click at screen position (x, y).

        Returns True if the click changed anything.
        """
        now = self._now(now)
        handled = self._click_handlers[self.phase](x, y, now)
        if not handled:
            logger.debug("Ignored click at (%d, %d) in %s", x, y, self.phase)
        return handled

    def tick(self, now: int | None = None) -> None:
        """Advance timers; call once per frame."""
        if self.phase is not Phase.PLAYING:
            return
        now = self._now(now)
        state = self.state

        if state.flip_back_due(now):
            state.conceal_picks()

        if state.is_expired(now, self.config.duration_ms):
            self._transition(Phase.LOST)
            logger.info("Time's up with score %d", state.score)
            self.presenter.stop_music()
            return

        if state.grid.is_fully_matched():
            self._transition(Phase.WON)
            logger.info("Grid cleared with score %d in %d flips", state.score, state.flips)
            if state.score > self.high_score:
                self.high_score = state.score
                self.new_record = True
                logger.info("New high score: %d", self.high_score)
                if self._store is not None:
                    self._store.save(self.high_score)
            self.presenter.stop_music()

    def quit_to_menu(self) -> None:
        if self.phase is Phase.MENU:
            return
        self._transition(Phase.MENU)
        self.presenter.stop_music()

    # -- queries --------------------------------------------------------------

    def remaining_ms(self, now: int | None = None) -> int:
        if self.phase is Phase.MENU:
            return self.config.duration_ms
        return self.state.remaining_ms(self._now(now), self.config.duration_ms)

    def snapshot(self, now: int | None = None) -> GameSnapshot:
        grid = self.state.grid
        cells = tuple(
            tuple(
                CellView(t.row, t.col, t.symbol, t.revealed, t.matched) for t in row
            )
            for row in grid.tiles
        )
        return GameSnapshot(
            phase=self.phase,
            cells=cells,
            score=self.state.score,
            high_score=self.high_score,
            flips=self.state.flips,
            remaining_ms=self.remaining_ms(now),
            new_record=self.new_record,
        )

    # -- per-phase click handlers ---------------------------------------------

    def _click_menu(self, x: int, y: int, now: int) -> bool:
        if not self.layout.start_button.contains(x, y):
            return False
        self._start_session(now)
        return True

    def _click_result(self, x: int, y: int, now: int) -> bool:
        if not self.layout.restart_button.contains(x, y):
            return False
        self._start_session(now)
        return True

    def _click_playing(self, x: int, y: int, now: int) -> bool:
        state = self.state
        if state.awaiting_flip_back:
            return False

        cell = self.layout.cell_at(x, y)
        if cell is None:
            return False
        tile = state.grid.tile(*cell)
        if tile.revealed or tile.matched:
            return False

        tile.revealed = True
        if state.first_pick is None:
            state.first_pick = cell
            return True

        state.second_pick = cell
        state.increment_flips()
        first = state.grid.tile(*state.first_pick)
        if first.symbol == tile.symbol:
            first.matched = tile.matched = True
            state.clear_picks()
            state.reward(self.config.match_bonus)
        else:
            state.flip_back_at = now + self.config.flip_delay_ms
            state.penalize(self.config.mismatch_penalty)
        return True

    # -- helpers --------------------------------------------------------------

    def _start_session(self, now: int) -> None:
        grid = Grid()
        grid.initialize(self._rng)
        self._transition(Phase.PLAYING)
        self.state = GameState(grid, started_at=now)
        self.new_record = False
        logger.info("Session started")
        self.presenter.play_music()

    def _transition(self, target: Phase) -> None:
        if target not in _TRANSITIONS[self.phase]:
            raise IllegalTransition(self.phase, target)
        self.phase = target

    def _now(self, now: int | None) -> int:
        return self._clock() if now is None else now
