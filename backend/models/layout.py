"""Screen geometry shared by the state machine and the GUI."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.config import GRID_COLS, GRID_ROWS


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int
    # The menu's start button ignores clicks on its border; the restart
    # button accepts them.
    inclusive: bool = True

    def contains(self, px: int, py: int) -> bool:
        if self.inclusive:
            return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h
        return self.x < px < self.x + self.w and self.y < py < self.y + self.h

    @property
    def center(self) -> tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


TILE_SIZE = 120
SCREEN_WIDTH = GRID_COLS * TILE_SIZE
SCREEN_HEIGHT = 600


@dataclass(frozen=True)
class Layout:
    tile_size: int = TILE_SIZE
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    start_button: Rect = field(
        default_factory=lambda: Rect(150, 450, 200, 80, inclusive=False)
    )
    restart_button: Rect = field(
        default_factory=lambda: Rect(
            SCREEN_WIDTH // 2 - 100, SCREEN_HEIGHT // 2 + 100, 200, 80
        )
    )

    def cell_at(self, x: int, y: int) -> tuple[int, int] | None:
        """Map screen coordinates to a ``(row, col)``, or None off the grid."""
        if x < 0 or y < 0:
            return None
        row, col = y // self.tile_size, x // self.tile_size
        if row >= GRID_ROWS or col >= GRID_COLS:
            return None
        return (row, col)

    def cell_rect(self, row: int, col: int) -> Rect:
        s = self.tile_size
        return Rect(col * s, row * s, s, s)
