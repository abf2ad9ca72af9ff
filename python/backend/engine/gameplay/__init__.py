from backend.engine.gameplay.game import MoveEngine

__all__ = ["MoveEngine"]
