"""The hollow: a stack of rectangular levels of block entities."""

from __future__ import annotations

from .entities import BangBoo, BlockEntity, Empty, MovableEntity
from .geometry import Direction, Location


class Hollow:
    """A grid of ``levels`` levels, each ``height`` rows by ``width`` columns."""

    def __init__(self, levels: int, height: int, width: int) -> None:
        if min(levels, height, width) < 0:
            raise ValueError("hollow dimensions must not be negative")
        self.levels = levels
        self.height = height
        self.width = width
        self.bangboo: BangBoo | None = None
        self._game_won = False
        self._grid: list[list[list[BlockEntity]]] = [
            [[Empty(self, Location(level, x, y)) for x in range(width)] for y in range(height)]
            for level in range(levels)
        ]

    # ----------------------------------------------------------- registration

    def register_block_entity(self, entity: BlockEntity) -> BlockEntity:
        """Place ``entity`` on the grid, replacing the block at its location."""
        loc = self._checked(entity.loc)
        entity.hollow = self
        self._grid[loc.level][loc.y][loc.x] = entity
        return entity

    def register_movable_entity(self, entity: MovableEntity) -> MovableEntity:
        """Place a movable entity on the block at its location."""
        loc = self._checked(entity.loc)
        entity.hollow = self
        self._grid[loc.level][loc.y][loc.x].mentity = entity
        return entity

    def register_bangboo(self, bangboo: BangBoo) -> BangBoo | None:
        """Place the BangBoo; return None if one is already registered."""
        if self.bangboo is not None:
            return None
        self.register_movable_entity(bangboo)
        self.bangboo = bangboo
        return bangboo

    # ------------------------------------------------------------------ moves

    def move_update(self, direction: Direction) -> bool:
        """Try to move the BangBoo one step; return whether anything moved."""
        return self.block_at(self._require_bangboo().loc).update(None, direction)

    def move_mentity(self, mentity: MovableEntity, src: Location, dst: Location) -> None:
        """Move ``mentity`` from ``src`` to ``dst``."""
        source = self.block_at(src)
        # Leave the source alone if another entity has already moved in.
        if source.mentity is mentity:
            source.mentity = None
        self.block_at(dst).mentity = mentity
        mentity.loc = dst

    def reached_goal(self) -> None:
        """Mark the game as won."""
        self._game_won = True

    # ---------------------------------------------------------------- queries

    def loc_in_hollow(self, loc: Location) -> bool:
        """Return whether ``loc`` lies inside the hollow."""
        return (
            0 <= loc.level < self.levels
            and 0 <= loc.x < self.width
            and 0 <= loc.y < self.height
        )

    def block_at(self, loc: Location) -> BlockEntity:
        """Return the block entity at ``loc``."""
        loc = self._checked(loc)
        return self._grid[loc.level][loc.y][loc.x]

    @property
    def current_level(self) -> int:
        """The level the BangBoo is on."""
        return self._require_bangboo().loc.level

    @property
    def game_won(self) -> bool:
        return self._game_won

    def render(self) -> str:
        """Draw the level the BangBoo is on as a boxed grid."""
        level = self._grid[self.current_level]
        border = "+ - " * self.width + "+"
        lines = []
        for row in level:
            lines.append(border)
            lines.append("".join(f"| {block} " for block in row) + "|")
        lines.append(border)
        return "\n".join(lines)

    # ---------------------------------------------------------------- helpers

    def _checked(self, loc: Location) -> Location:
        if not self.loc_in_hollow(loc):
            raise IndexError(f"location {loc} is outside the hollow")
        return loc

    def _require_bangboo(self) -> BangBoo:
        if self.bangboo is None:
            raise RuntimeError("no BangBoo has been registered")
        return self.bangboo