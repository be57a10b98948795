from backend.models.grid import Grid, Tile
from backend.models.highscore import HighScoreStore
from backend.models.layout import Layout, Rect

__all__ = ["Grid", "HighScoreStore", "Layout", "Rect", "Tile"]
