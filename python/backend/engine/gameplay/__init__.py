from backend.engine.gameplay.game import GamePlay, reorder

__all__ = ["GamePlay", "reorder"]
