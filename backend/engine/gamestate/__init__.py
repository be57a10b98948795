from backend.engine.gamestate.state import GameState, Phase, Pos

__all__ = ["GameState", "Phase", "Pos"]
