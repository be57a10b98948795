"""Shared fixtures: a fake presenter, click helpers and a started game."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from backend.engine.gameplay import MemoryGame
from backend.engine.gamestate import Phase, Pos
from backend.models.grid import Grid
from backend.models.highscore import HighScoreStore
from backend.models.layout import Layout

LAYOUT = Layout()
START = LAYOUT.start_button.center
RESTART = LAYOUT.restart_button.center


class RecordingPresenter:
    """Presenter that records the audio calls the game makes."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def play_music(self) -> None:
        self.calls.append("play")

    def stop_music(self) -> None:
        self.calls.append("stop")

    def fill_rect(self, rect, color) -> None:
        pass

    def draw_texture(self, name, rect) -> None:
        pass

    def draw_text(self, text, pos, color) -> None:
        pass


# -- helpers ------------------------------------------------------------------


def center_of(pos: Pos) -> tuple[int, int]:
    """Screen coordinates of the centre of the cell at *pos*."""
    return LAYOUT.cell_rect(*pos).center


def pairs_of(grid: Grid) -> dict[int, list[Pos]]:
    """Map every symbol to the two positions holding it."""
    out: dict[int, list[Pos]] = {}
    for row in grid.tiles:
        for t in row:
            out.setdefault(t.symbol, []).append(t.pos)
    return out


def click(game: MemoryGame, pos: Pos, now: int) -> bool:
    return game.on_pointer_down(*center_of(pos), now=now)


# -- fixtures -----------------------------------------------------------------


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def store(tmp_path: Path) -> HighScoreStore:
    return HighScoreStore(tmp_path / "highscore.txt")


@pytest.fixture
def game(store: HighScoreStore, presenter: RecordingPresenter) -> MemoryGame:
    """A game already in PLAYING, started at t=0."""
    g = MemoryGame(store, presenter=presenter, clock=lambda: 0, rng=random.Random(42))
    assert g.on_pointer_down(*START, now=0)
    assert g.phase is Phase.PLAYING
    return g
