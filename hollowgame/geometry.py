"""Directions and grid locations inside a hollow."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A move direction on a level."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


@dataclass(frozen=True)
class Location:
    """A cell in the hollow: level, column ``x`` and row ``y``."""

    level: int
    x: int
    y: int

    def add_dir(self, direction: Direction) -> Location:
        """Return the neighbouring location one step in ``direction``."""
        dx, dy = _OFFSETS.get(direction, (0, 0))
        return Location(self.level, self.x + dx, self.y + dy)

    def add_level(self, dl: int) -> Location:
        """Return the same cell ``dl`` levels away."""
        return Location(self.level + dl, self.x, self.y)