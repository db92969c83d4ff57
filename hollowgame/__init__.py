"""A multi-level grid puzzle game with boxes, stones, switches, doors and portals."""

__version__ = "0.1.0"
__all__ = ["geometry", "entities", "hollow", "fairy"]