"""Block entities that make up the grid and movable entities that sit on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .geometry import Direction, Location

if TYPE_CHECKING:
    from .hollow import Hollow

MAX_CONNECTIONS = 5


class Entity(ABC):
    """Anything that has a place in a hollow."""

    def __init__(self, hollow: Hollow, loc: Location) -> None:
        self.hollow = hollow
        self.loc = loc

    @abstractmethod
    def update(self, from_entity: MovableEntity | None, to_dir: Direction) -> bool:
        """React to being pushed in ``to_dir``; return whether the push succeeds."""


# ---------------------------------------------------------------- movables


class MovableEntity(Entity):
    """An entity that can be pushed from cell to cell."""

    symbol = "?"
    is_bangboo = False

    def __str__(self) -> str:
        return self.symbol

    def update(self, from_entity: MovableEntity | None, to_dir: Direction) -> bool:
        hollow = self.hollow
        current = hollow.block_at(self.loc)
        target = self.loc.add_dir(to_dir)
        if not hollow.loc_in_hollow(target):
            return False
        following = hollow.block_at(target)

        if from_entity is None:
            if following.mentity is not None:
                return following.mentity.update(self, to_dir)
            if not following.update(self, to_dir):
                return False
            hollow.move_mentity(self, self.loc, target)
            current.on_leave(self)
            following.on_step(self)
            return True

        previous = hollow.block_at(from_entity.loc)
        if following.mentity is None:
            if not following.update(self, to_dir):
                return False
            vacated = self.loc
            hollow.move_mentity(self, self.loc, target)
            current.on_leave(self)
            following.on_step(self)
            hollow.move_mentity(from_entity, from_entity.loc, vacated)
            previous.on_leave(from_entity)
            current.on_step(from_entity)
            return True

        if not following.mentity.update(self, to_dir):
            return False
        hollow.move_mentity(from_entity, from_entity.loc, from_entity.loc.add_dir(to_dir))
        previous.on_leave(from_entity)
        current.on_step(from_entity)
        return True


class BangBoo(MovableEntity):
    """The player-controlled entity."""

    symbol = "☺"
    is_bangboo = True


class Stone(MovableEntity):
    """A heavy object that can only be pushed."""

    symbol = "◍"


class Box(MovableEntity):
    """A light object; when the BangBoo cannot push it, they swap places."""

    symbol = "☒"

    def update(self, from_entity: MovableEntity | None, to_dir: Direction) -> bool:
        if from_entity is None:
            return True
        if not from_entity.is_bangboo:
            return super().update(from_entity, to_dir)
        if super().update(from_entity, to_dir):
            return True

        hollow = self.hollow
        current = hollow.block_at(self.loc)
        previous = hollow.block_at(from_entity.loc)
        vacated = from_entity.loc
        hollow.move_mentity(from_entity, from_entity.loc, from_entity.loc.add_dir(to_dir))
        hollow.move_mentity(self, self.loc, vacated)
        current.on_leave(self)
        current.on_step(from_entity)
        previous.on_leave(from_entity)
        previous.on_step(self)
        return True


# ------------------------------------------------------------------ blocks


class BlockEntity(Entity):
    """A grid cell, possibly holding one movable entity."""

    symbol = " "

    def __init__(self, hollow: Hollow, loc: Location) -> None:
        super().__init__(hollow, loc)
        self.mentity: MovableEntity | None = None

    def __str__(self) -> str:
        return str(self.mentity) if self.mentity is not None else self.symbol

    def on_leave(self, mentity: MovableEntity) -> None:
        """Called after ``mentity`` has left this block; drops a stale reference to it."""
        if self.mentity is mentity and mentity.loc != self.loc:
            self.mentity = None

    def on_step(self, mentity: MovableEntity) -> None:
        """Called after ``mentity`` has stepped onto this block."""

    def update(self, from_entity: MovableEntity | None, to_dir: Direction) -> bool:
        if self.mentity is None:
            return True
        return self.mentity.update(from_entity, to_dir)


class Switch(BlockEntity):
    """A block that unlocks its connected doors when switched on."""

    def __init__(self, hollow: Hollow, loc: Location) -> None:
        super().__init__(hollow, loc)
        self._doors: list[Door] = []
        self._on = False

    @property
    def symbol(self) -> str:  # type: ignore[override]
        return "◈" if self._on else "◇"

    @property
    def is_on(self) -> bool:
        return self._on

    def add_door_conn(self, door: Door) -> None:
        """Connect a door to this switch."""
        if len(self._doors) >= MAX_CONNECTIONS:
            raise ValueError(f"a switch holds at most {MAX_CONNECTIONS} doors")
        self._doors.append(door)

    def _refresh_doors(self) -> None:
        for door in self._doors:
            door.update_door()

    def on_step(self, mentity: MovableEntity) -> None:
        self._on = True
        self._refresh_doors()


class Lever(Switch):
    """A switch that stays on once stepped on."""


class Button(Switch):
    """A switch that is on only while something stands on it."""

    def on_leave(self, mentity: MovableEntity) -> None:
        self._on = False
        self._refresh_doors()


class Door(BlockEntity):
    """A block that can be entered only when all its switches are on."""

    def __init__(self, hollow: Hollow, loc: Location) -> None:
        super().__init__(hollow, loc)
        self._switches: list[Switch] = []
        self._locked = True

    @property
    def symbol(self) -> str:  # type: ignore[override]
        return "⌹" if self._locked else "⬚"

    @property
    def locked(self) -> bool:
        return self._locked

    def add_switch_conn(self, switch: Switch) -> None:
        """Connect a switch to this door."""
        if len(self._switches) >= MAX_CONNECTIONS:
            raise ValueError(f"a door holds at most {MAX_CONNECTIONS} switches")
        self._switches.append(switch)

    def update_door(self) -> None:
        """Recompute the lock from the state of the connected switches."""
        self._locked = not all(switch.is_on for switch in self._switches)

    def update(self, from_entity: MovableEntity | None, to_dir: Direction) -> bool:
        if self._locked:
            return False
        return super().update(from_entity, to_dir)


class Goal(BlockEntity):
    """Reaching this block with the BangBoo wins the game."""

    symbol = "G"

    def on_step(self, mentity: MovableEntity) -> None:
        if mentity.is_bangboo:
            self.hollow.reached_goal()


class Portal(BlockEntity):
    """Sends the BangBoo one level up or down."""

    def __init__(self, hollow: Hollow, loc: Location, direction_down: bool) -> None:
        super().__init__(hollow, loc)
        self.direction_down = direction_down

    @property
    def symbol(self) -> str:  # type: ignore[override]
        return "↡" if self.direction_down else "↟"

    def on_step(self, mentity: MovableEntity) -> None:
        if not mentity.is_bangboo:
            return
        src = mentity.loc
        dst = src.add_level(-1 if self.direction_down else 1)
        self.hollow.block_at(dst).mentity = None
        self.hollow.move_mentity(mentity, src, dst)


class Wall(BlockEntity):
    """A block nothing can enter."""

    symbol = "▦"

    def update(self, from_entity: MovableEntity | None, to_dir: Direction) -> bool:
        return False


class Empty(BlockEntity):
    """A plain floor block."""

    symbol = " "