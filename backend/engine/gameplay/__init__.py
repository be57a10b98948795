from backend.engine.gameplay.game import MemoryGame, monotonic_ms
from backend.engine.gameplay.presenter import (
    CellView,
    GameSnapshot,
    NullPresenter,
    Presenter,
)

__all__ = [
    "CellView",
    "GameSnapshot",
    "MemoryGame",
    "NullPresenter",
    "Presenter",
    "monotonic_ms",
]
