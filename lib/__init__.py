from lib.vector import Vector2D

__all__ = ["Vector2D"]
