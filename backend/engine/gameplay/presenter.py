"""What the core needs from a frontend, and what it hands back each frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from backend.engine.gamestate import Phase
from backend.models.layout import Rect

Color = tuple[int, int, int]


class Presenter(Protocol):
    """Drawing and audio capabilities of a frontend.

    The state machine only ever calls the music methods; the drawing
    methods are what a frontend's renderer is built on.
    """

    def play_music(self) -> None: ...

    def stop_music(self) -> None: ...

    def fill_rect(self, rect: Rect, color: Color) -> None: ...

    def draw_texture(self, name: str, rect: Rect) -> None: ...

    def draw_text(self, text: str, pos: tuple[int, int], color: Color) -> None: ...


class NullPresenter:
    """Presenter for headless use: draws nothing, plays nothing."""

    def play_music(self) -> None:
        pass

    def stop_music(self) -> None:
        pass

    def fill_rect(self, rect: Rect, color: Color) -> None:
        pass

    def draw_texture(self, name: str, rect: Rect) -> None:
        pass

    def draw_text(self, text: str, pos: tuple[int, int], color: Color) -> None:
        pass


@dataclass(frozen=True)
class CellView:
    row: int
    col: int
    symbol: int
    revealed: bool
    matched: bool

    @property
    def face_up(self) -> bool:
        return self.revealed or self.matched


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of everything a frontend renders."""

    phase: Phase
    cells: tuple[tuple[CellView, ...], ...]
    score: int
    high_score: int
    flips: int
    remaining_ms: int
    new_record: bool
