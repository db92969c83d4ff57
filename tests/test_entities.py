import pytest

from hollowgame.entities import (
    BangBoo,
    Box,
    Button,
    Door,
    Goal,
    Lever,
    Portal,
    Stone,
    Wall,
)
from hollowgame.geometry import Direction, Location
from hollowgame.hollow import Hollow


def _status(door):
    return "unlocked" if str(door) == "⬚" else "locked"


def _occupant(hollow, level, x, y):
    mentity = hollow.block_at(Location(level, x, y)).mentity
    return str(mentity) if mentity is not None else "empty"


def test_symbols():
    hollow = Hollow(1, 1, 1)
    loc = Location(0, 0, 0)
    assert str(BangBoo(hollow, loc)) == "☺"
    assert str(Stone(hollow, loc)) == "◍"
    assert str(Box(hollow, loc)) == "☒"
    assert str(Wall(hollow, loc)) == "▦"
    assert str(Goal(hollow, loc)) == "G"
    assert str(Door(hollow, loc)) == "⌹"
    assert str(Lever(hollow, loc)) == "◇"
    assert str(Portal(hollow, loc, True)) == "↡"
    assert str(Portal(hollow, loc, False)) == "↟"


def test_block_shows_its_movable_entity():
    hollow = Hollow(1, 1, 1)
    wall = hollow.register_block_entity(Wall(hollow, Location(0, 0, 0)))
    hollow.register_movable_entity(Stone(hollow, Location(0, 0, 0)))
    assert str(wall) == "◍"


def test_levers_and_button_unlock_doors():
    hollow = Hollow(1, 3, 3)
    door1 = hollow.register_block_entity(Door(hollow, Location(0, 1, 1)))
    door2 = hollow.register_block_entity(Door(hollow, Location(0, 0, 2)))
    door3 = hollow.register_block_entity(Door(hollow, Location(0, 1, 2)))
    door4 = hollow.register_block_entity(Door(hollow, Location(0, 2, 2)))
    lever1 = hollow.register_block_entity(Lever(hollow, Location(0, 0, 0)))
    lever2 = hollow.register_block_entity(Lever(hollow, Location(0, 2, 0)))
    button = hollow.register_block_entity(Button(hollow, Location(0, 1, 0)))
    lever1.add_door_conn(door1)
    lever1.add_door_conn(door3)
    lever2.add_door_conn(door2)
    lever2.add_door_conn(door3)
    button.add_door_conn(door4)
    button.add_door_conn(door2)
    door1.add_switch_conn(lever1)
    door2.add_switch_conn(lever2)
    door2.add_switch_conn(button)
    door3.add_switch_conn(lever1)
    door3.add_switch_conn(lever2)
    door4.add_switch_conn(button)
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 1)))
    doors = [door1, door2, door3, door4]

    lever1.on_step(bangboo)
    assert [_status(d) for d in doors] == ["unlocked", "locked", "locked", "locked"]
    assert lever1.is_on and str(lever1) == "◈"

    lever2.on_step(bangboo)
    assert [_status(d) for d in doors] == ["unlocked", "locked", "unlocked", "locked"]

    button.on_step(bangboo)
    assert [_status(d) for d in doors] == ["unlocked"] * 4


def test_buttons_release_on_leave():
    hollow = Hollow(1, 3, 3)
    door1 = hollow.register_block_entity(Door(hollow, Location(0, 1, 1)))
    door2 = hollow.register_block_entity(Door(hollow, Location(0, 0, 2)))
    door3 = hollow.register_block_entity(Door(hollow, Location(0, 2, 2)))
    button1 = hollow.register_block_entity(Button(hollow, Location(0, 0, 0)))
    button2 = hollow.register_block_entity(Button(hollow, Location(0, 2, 0)))
    button1.add_door_conn(door1)
    button1.add_door_conn(door3)
    button2.add_door_conn(door1)
    button2.add_door_conn(door2)
    door1.add_switch_conn(button1)
    door1.add_switch_conn(button2)
    door2.add_switch_conn(button2)
    door3.add_switch_conn(button1)
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(0, 1, 0)))
    doors = [door1, door2, door3]

    button1.on_step(bangboo)
    assert [_status(d) for d in doors] == ["locked", "locked", "unlocked"]

    button1.on_leave(bangboo)
    button2.on_step(bangboo)
    assert [_status(d) for d in doors] == ["locked", "unlocked", "locked"]

    button2.on_leave(bangboo)
    assert [_status(d) for d in doors] == ["locked"] * 3
    assert not button2.is_on


def test_lever_stays_on_after_leave():
    hollow = Hollow(1, 1, 2)
    door = hollow.register_block_entity(Door(hollow, Location(0, 1, 0)))
    lever = hollow.register_block_entity(Lever(hollow, Location(0, 0, 0)))
    lever.add_door_conn(door)
    door.add_switch_conn(lever)
    stone = Stone(hollow, Location(0, 0, 0))
    lever.on_step(stone)
    lever.on_leave(stone)
    assert lever.is_on
    assert not door.locked


def test_connection_limit():
    hollow = Hollow(1, 1, 1)
    lever = Lever(hollow, Location(0, 0, 0))
    door = Door(hollow, Location(0, 0, 0))
    for _ in range(5):
        lever.add_door_conn(door)
        door.add_switch_conn(lever)
    with pytest.raises(ValueError):
        lever.add_door_conn(door)
    with pytest.raises(ValueError):
        door.add_switch_conn(lever)


def test_door_without_switches_unlocks_on_update():
    hollow = Hollow(1, 1, 1)
    door = Door(hollow, Location(0, 0, 0))
    assert door.locked
    door.update_door()
    assert not door.locked


def test_portal_moves_only_bangboo():
    hollow = Hollow(2, 2, 2)
    portal1 = hollow.register_block_entity(Portal(hollow, Location(0, 1, 1), False))
    hollow.register_block_entity(Portal(hollow, Location(1, 1, 1), True))
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 0)))
    box = hollow.register_movable_entity(Box(hollow, Location(0, 0, 1)))

    assert _occupant(hollow, 0, 1, 1) == "empty"
    assert _occupant(hollow, 1, 1, 1) == "empty"

    hollow.move_mentity(box, Location(0, 0, 1), Location(0, 1, 1))
    portal1.on_step(box)
    assert _occupant(hollow, 0, 1, 1) == "☒"
    assert _occupant(hollow, 1, 1, 1) == "empty"

    hollow.move_mentity(box, Location(0, 1, 1), Location(0, 0, 1))
    hollow.move_mentity(bangboo, Location(0, 0, 0), Location(0, 1, 1))
    portal1.on_step(bangboo)
    assert _occupant(hollow, 0, 1, 1) == "empty"
    assert _occupant(hollow, 1, 1, 1) == "☺"
    assert bangboo.loc == Location(1, 1, 1)
    assert hollow.current_level == 1


def test_portal_replaces_entity_at_destination():
    hollow = Hollow(2, 1, 1)
    portal = hollow.register_block_entity(Portal(hollow, Location(1, 0, 0), True))
    hollow.register_movable_entity(Stone(hollow, Location(0, 0, 0)))
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(1, 0, 0)))
    portal.on_step(bangboo)
    assert hollow.block_at(Location(0, 0, 0)).mentity is bangboo
    assert hollow.block_at(Location(1, 0, 0)).mentity is None


def test_goal_wins_only_for_bangboo():
    hollow = Hollow(1, 2, 2)
    goal = hollow.register_block_entity(Goal(hollow, Location(0, 1, 1)))
    box = hollow.register_movable_entity(Box(hollow, Location(0, 1, 0)))
    stone = hollow.register_movable_entity(Stone(hollow, Location(0, 0, 1)))
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 0)))
    goal.on_step(box)
    assert hollow.game_won is False
    goal.on_step(stone)
    assert hollow.game_won is False
    goal.on_step(bangboo)
    assert hollow.game_won is True


def test_wall_rejects_push():
    hollow = Hollow(1, 1, 2)
    wall = hollow.register_block_entity(Wall(hollow, Location(0, 1, 0)))
    stone = hollow.register_movable_entity(Stone(hollow, Location(0, 0, 0)))
    assert wall.update(stone, Direction.RIGHT) is False
    assert stone.update(None, Direction.RIGHT) is False
    assert stone.loc == Location(0, 0, 0)


def test_stone_pushes_into_empty_cell():
    hollow = Hollow(1, 1, 3)
    hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 0)))
    stone = hollow.register_movable_entity(Stone(hollow, Location(0, 1, 0)))
    assert hollow.move_update(Direction.RIGHT) is True
    assert stone.loc == Location(0, 2, 0)
    assert _occupant(hollow, 0, 1, 0) == "☺"
    assert _occupant(hollow, 0, 0, 0) == "empty"


def test_blocked_stone_does_not_move_bangboo():
    hollow = Hollow(1, 1, 2)
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 0)))
    hollow.register_movable_entity(Stone(hollow, Location(0, 1, 0)))
    assert hollow.move_update(Direction.RIGHT) is False
    assert bangboo.loc == Location(0, 0, 0)


def test_blocked_box_swaps_with_bangboo():
    hollow = Hollow(1, 1, 2)
    bangboo = hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 0)))
    box = hollow.register_movable_entity(Box(hollow, Location(0, 1, 0)))
    assert hollow.move_update(Direction.RIGHT) is True
    assert bangboo.loc == Location(0, 1, 0)
    assert box.loc == Location(0, 0, 0)
    assert _occupant(hollow, 0, 0, 0) == "☒"
    assert _occupant(hollow, 0, 1, 0) == "☺"


def test_box_swap_triggers_button_events():
    hollow = Hollow(1, 1, 3)
    door = hollow.register_block_entity(Door(hollow, Location(0, 2, 0)))
    button = hollow.register_block_entity(Button(hollow, Location(0, 0, 0)))
    button.add_door_conn(door)
    door.add_switch_conn(button)
    hollow.register_bangboo(BangBoo(hollow, Location(0, 0, 0)))
    hollow.register_movable_entity(Box(hollow, Location(0, 1, 0)))
    # The door is locked, so the box cannot move and swaps onto the button.
    assert hollow.move_update(Direction.RIGHT) is True
    assert _occupant(hollow, 0, 0, 0) == "☒"
    assert button.is_on
    assert not door.locked