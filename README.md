# hollowgame

A small terminal puzzle game played on a stack of grid levels. You steer the
BangBoo (`☺`) with `w`/`a`/`s`/`d` and try to reach the goal (`G`).

## Installing

```
pip install .
```

## Playing

```
hollowgame
```

This reads `level.txt` from the current directory. Give another level file as
an argument:

```
hollowgame mylevel.txt
```

After each move the level the BangBoo is on is drawn again, followed by the
current level number. Type `w`, `a`, `s` or `d` (only the first character of
each word typed is used) and `e` to quit. The game ends when the BangBoo
steps on the goal, when you type `e`, or when input runs out.

To replay a fixed sequence of moves instead of reading input:

```
hollowgame mylevel.txt --moves ssddwaaswwddss
```

If the level file cannot be opened the command prints
`[ERR] Failed to find <file>!` and exits with status 1; a malformed level file
also exits with status 1 after printing the problem.

## Pieces on the board

| Symbol | Meaning |
|--------|---------|
| `☺` | BangBoo, the piece you control |
| `☒` | Box: can be pushed; if the BangBoo cannot push it, the two swap places |
| `◍` | Stone: can only be pushed |
| `▦` | Wall |
| `⌹` / `⬚` | Door, locked / open |
| `◇` / `◈` | Lever or button, off / on (a lever stays on, a button turns off when left) |
| `↟` / `↡` | Portal up / down a level (BangBoo only; anything on the other side is removed) |
| `G` | Goal |

A door opens only when every switch connected to it is on. A door or switch
holds at most five connections.

## Level files

A level file starts with four whitespace-separated integers: the number of
levels, the width, the height and the number of door/switch connections. Then
come the cells, level by level and row by row, one non-blank character each:

`B` BangBoo, `X` box, `S` stone, `W` wall, `G` goal, `>` portal up, `<` portal
down, `D` door, `L` lever, `O` button; any other character is an empty cell.

Each connection is six integers, `level x y level x y`: a door location followed
by a lever or button location. A connection that does not join a door to a
lever or button raises `hollowgame.fairy.LevelFormatError`.

## Using it as a library

```python
from hollowgame.fairy import Fairy
from hollowgame.geometry import Direction, Location

fairy = Fairy()
hollow = fairy.read_hollow_from_file("level.txt")
hollow.move_update(Direction.RIGHT)
print(hollow.render())
print(hollow.game_won)
print(hollow.block_at(Location(0, 1, 0)))
```

- `hollowgame.geometry`: `Direction` and `Location` (`level`, `x`, `y`, with
  `add_dir` and `add_level`).
- `hollowgame.entities`: the movable pieces (`BangBoo`, `Box`, `Stone`) and the
  blocks (`Wall`, `Door`, `Lever`, `Button`, `Portal`, `Goal`, `Empty`).
- `hollowgame.hollow`: `Hollow`, the grid, with `register_block_entity`,
  `register_movable_entity`, `register_bangboo`, `move_update`, `move_mentity`,
  `block_at`, `loc_in_hollow`, `render` and the `current_level` and `game_won`
  properties.
- `hollowgame.fairy`: `Fairy`, which builds a hollow with `create_hollow`,
  `read_hollow_from_string` or `read_hollow_from_file` (one hollow per fairy;
  later calls return `None`) and plays it with `start_connection(actions, output)`.
  `start_connection` replays a string of moves such as `"ssddwaaswwddss"` and
  writes each board to `output` (standard output by default), or reads moves
  from standard input when `actions` is `None`. It returns whether the game
  was won.

## What it does not do

There is no level editor, no saving or resuming of a game and no undo; levels
come only from level files or strings, and the board is drawn as plain text.