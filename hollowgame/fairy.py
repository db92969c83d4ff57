"""Loading hollows from level descriptions and playing them."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from .entities import (
    BangBoo,
    Box,
    Button,
    Door,
    Goal,
    Lever,
    Portal,
    Stone,
    Switch,
    Wall,
)
from .geometry import Direction, Location
from .hollow import Hollow

DEFAULT_LEVEL_FILE = "level.txt"
PROMPT = "Input move (w/a/s/d, e to exit): "
SEPARATOR = "=" * 55

_KEYS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

_Placer = Callable[[Hollow, Location], object]

_PLACERS: dict[str, _Placer] = {
    "B": lambda h, loc: h.register_bangboo(BangBoo(h, loc)),
    "X": lambda h, loc: h.register_movable_entity(Box(h, loc)),
    "S": lambda h, loc: h.register_movable_entity(Stone(h, loc)),
    "W": lambda h, loc: h.register_block_entity(Wall(h, loc)),
    "G": lambda h, loc: h.register_block_entity(Goal(h, loc)),
    ">": lambda h, loc: h.register_block_entity(Portal(h, loc, False)),
    "<": lambda h, loc: h.register_block_entity(Portal(h, loc, True)),
    "D": lambda h, loc: h.register_block_entity(Door(h, loc)),
    "L": lambda h, loc: h.register_block_entity(Lever(h, loc)),
    "O": lambda h, loc: h.register_block_entity(Button(h, loc)),
}

_SWITCH_CHARS = {"L", "O"}


class LevelFormatError(ValueError):
    """Raised when a level description cannot be read."""


class _Scanner:
    """Reads integers and single non-blank characters from level text."""

    _INT = re.compile(r"\s*([+-]?\d+)")
    _CHAR = re.compile(r"\s*(\S)")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise LevelFormatError(f"expected {what} at offset {self._pos}")
        self._pos = match.end()
        return match.group(1)

    def integer(self) -> int:
        return int(self._take(self._INT, "an integer"))

    def char(self) -> str:
        return self._take(self._CHAR, "a grid cell")


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


class Fairy:
    """Owns a single hollow: builds it from a level description and runs the game."""

    def __init__(self) -> None:
        self.hollow: Hollow | None = None

    def create_hollow(self, levels: int, height: int, width: int) -> Hollow | None:
        """Create the hollow; return None if this fairy already has one."""
        if self.hollow is not None:
            return None
        self.hollow = Hollow(levels, height, width)
        return self.hollow

    def read_hollow_from_string(self, text: str) -> Hollow | None:
        """Build the hollow from a level description.

        Returns None if this fairy already has a hollow.
        """
        scanner = _Scanner(text)
        levels, width, height, connections = (scanner.integer() for _ in range(4))
        try:
            hollow = self.create_hollow(levels, height, width)
        except ValueError as exc:
            raise LevelFormatError(str(exc)) from exc
        if hollow is None:
            return None

        cells: dict[Location, str] = {}
        for level in range(levels):
            for y in range(height):
                for x in range(width):
                    loc = Location(level, x, y)
                    cell = scanner.char()
                    cells[loc] = cell
                    placer = _PLACERS.get(cell)
                    if placer is not None:
                        placer(hollow, loc)

        for _ in range(connections):
            al, ax, ay, bl, bx, by = (scanner.integer() for _ in range(6))
            door_loc = Location(al, ax, ay)
            switch_loc = Location(bl, bx, by)
            if cells.get(door_loc) != "D" or cells.get(switch_loc) not in _SWITCH_CHARS:
                raise LevelFormatError(
                    "Door / Switch connection should be on Door & Switch block entity!"
                )
            door = hollow.block_at(door_loc)
            switch = hollow.block_at(switch_loc)
            assert isinstance(door, Door) and isinstance(switch, Switch)
            try:
                door.add_switch_conn(switch)
                switch.add_door_conn(door)
            except ValueError as exc:
                raise LevelFormatError(str(exc)) from exc

        return hollow

    def read_hollow_from_file(self, filename: str = DEFAULT_LEVEL_FILE) -> Hollow | None:
        """Build the hollow from the level file ``filename``."""
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
        return self.read_hollow_from_string(text)

    def start_connection(
        self,
        actions: Iterable[str] | None = None,
        output: TextIO | None = None,
    ) -> bool:
        """Play the game and return whether it was won.

        With ``actions`` (e.g. the string ``"ddsw"``) the moves are replayed and
        echoed; without it, moves are read from standard input.
        """
        if self.hollow is None:
            raise RuntimeError("no hollow has been created")
        hollow = self.hollow
        out = output if output is not None else sys.stdout
        scripted = actions is not None
        moves: Iterator[str] = (
            iter(actions) if actions is not None else (token[:1] for token in _stdin_tokens())
        )

        while True:
            out.write("\n" if scripted else "\n" * 9)
            out.write(hollow.render() + "\n")
            out.write(SEPARATOR + "\n")
            out.write(f"Current level: {hollow.current_level + 1}/{hollow.levels}\n\n")

            if hollow.game_won:
                out.write("[*] You won! [*]\n")
                return True

            if scripted:
                move = next(moves, None)
                if move is None:
                    return False
                out.write(PROMPT + move + "\n")
            else:
                out.write(PROMPT)
                out.flush()
                move = next(moves, None)
                if move is None:
                    out.write("\n")
                    return False

            if move == "e":
                return False
            direction = _KEYS.get(move)
            if direction is not None:
                hollow.move_update(direction)


def main(argv: list[str] | None = None) -> int:
    """Load a level file and play it."""
    parser = argparse.ArgumentParser(description="Push boxes and stones to reach the goal.")
    parser.add_argument("level", nargs="?", default=DEFAULT_LEVEL_FILE, help="level file")
    parser.add_argument("-m", "--moves", help="replay these moves (w/a/s/d/e) instead of reading input")
    args = parser.parse_args(argv)

    fairy = Fairy()
    try:
        fairy.read_hollow_from_file(args.level)
    except OSError:
        print(f"[ERR] Failed to find {args.level}!")
        return 1
    except LevelFormatError as exc:
        print(exc)
        return 1

    fairy.start_connection(args.moves)
    return 0


if __name__ == "__main__":
    sys.exit(main())