"""Grid model for the memory match game."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field

from backend.config import GRID_COLS, GRID_ROWS, SYMBOL_COUNT


@dataclass
class Tile:
    """One cell of the grid.  ``symbol`` is hidden until ``revealed``."""

    row: int
    col: int
    symbol: int
    revealed: bool = False
    matched: bool = False

    @property
    def pos(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass
class Grid:
    """A fixed 4×4 grid holding eight symbols, each exactly twice.

    Tiles are stored as a 2D list in row-major order.
    """

    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    tiles: list[list[Tile]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [
                [Tile(r, c, 0) for c in range(self.cols)] for r in range(self.rows)
            ]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int]) -> Grid:
        """Create a face-down grid from a flat row-major symbol list.

        Example::

            Grid.from_flat([1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8])
        """
        size = GRID_ROWS * GRID_COLS
        if len(flat) != size:
            raise ValueError(
                f"Expected {size} symbols for a {GRID_ROWS}×{GRID_COLS} grid, "
                f"got {len(flat)}."
            )
        if Counter(flat) != Counter(_symbol_pairs()):
            raise ValueError(
                f"Symbols must be 1..{SYMBOL_COUNT}, each appearing exactly twice."
            )
        grid = cls()
        grid._assign(flat)
        return grid

    def initialize(self, rng: random.Random | None = None) -> None:
        """Deal a freshly shuffled pair of every symbol, all face down."""
        randint = (rng or random).randint
        deck = _symbol_pairs()
        # Fisher–Yates: swap each slot with a random one at or below it.
        for i in range(len(deck) - 1, 0, -1):
            j = randint(0, i)
            deck[i], deck[j] = deck[j], deck[i]
        self._assign(deck)

    def _assign(self, flat: list[int]) -> None:
        for r in range(self.rows):
            for c in range(self.cols):
                self.tiles[r][c] = Tile(r, c, flat[r * self.cols + c])

    # -- queries --------------------------------------------------------------

    def tile(self, row: int, col: int) -> Tile:
        return self.tiles[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def symbols(self) -> list[int]:
        """Row-major list of every tile's symbol."""
        return [t.symbol for row in self.tiles for t in row]

    @property
    def matched_count(self) -> int:
        return sum(t.matched for row in self.tiles for t in row)

    def is_fully_matched(self) -> bool:
        """Check if every tile has been paired."""
        return all(t.matched for row in self.tiles for t in row)

    def copy(self) -> Grid:
        return Grid(
            rows=self.rows,
            cols=self.cols,
            tiles=[
                [Tile(t.row, t.col, t.symbol, t.revealed, t.matched) for t in row]
                for row in self.tiles
            ],
        )


def _symbol_pairs() -> list[int]:
    return [s for s in range(1, SYMBOL_COUNT + 1) for _ in range(2)]
