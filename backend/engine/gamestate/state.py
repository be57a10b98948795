"""Tracks the mutable state of a game session."""

from __future__ import annotations

from enum import StrEnum

from backend.engine import scoring
from backend.models.grid import Grid

Pos = tuple[int, int]


class Phase(StrEnum):
    MENU = "menu"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameState:
    """Holds the grid, pending picks, score, flip counter and clock marks."""

    def __init__(self, grid: Grid, started_at: int) -> None:
        self.grid = grid
        self.score: int = 0
        self.flips: int = 0
        self.started_at: int = started_at
        self.flip_back_at: int | None = None
        self.first_pick: Pos | None = None
        self.second_pick: Pos | None = None

    # -- picks ----------------------------------------------------------------

    @property
    def pending_picks(self) -> int:
        return (self.first_pick is not None) + (self.second_pick is not None)

    @property
    def awaiting_flip_back(self) -> bool:
        return self.flip_back_at is not None

    def clear_picks(self) -> None:
        self.first_pick = None
        self.second_pick = None

    def conceal_picks(self) -> None:
        """Turn the pending mismatched pair face down again."""
        for pos in (self.first_pick, self.second_pick):
            if pos is not None:
                self.grid.tile(*pos).revealed = False
        self.clear_picks()
        self.flip_back_at = None

    # -- time tracking --------------------------------------------------------

    def remaining_ms(self, now: int, duration: int) -> int:
        return scoring.remaining_ms(self.started_at, now, duration)

    def is_expired(self, now: int, duration: int) -> bool:
        return scoring.is_expired(self.started_at, now, duration)

    def flip_back_due(self, now: int) -> bool:
        return self.flip_back_at is not None and now >= self.flip_back_at

    # -- scoring --------------------------------------------------------------

    def increment_flips(self) -> None:
        self.flips += 1

    def reward(self, bonus: int) -> None:
        self.score = scoring.apply_match(self.score, bonus)

    def penalize(self, penalty: int) -> None:
        self.score = scoring.apply_mismatch(self.score, penalty)
