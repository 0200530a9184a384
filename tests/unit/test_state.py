import dataclasses

import pytest

from toyrobot.protocol.types import Direction
from toyrobot.server.state import (
    Position,
    RobotState,
    format_report,
    initial_state,
    is_on_table,
    move,
    place,
    turn_left,
    turn_right,
)


def test_initial_state_is_off_table_sentinel():
    state = initial_state()
    assert state.position == Position(-1, -1)
    assert state.facing is Direction.NORTH
    assert not is_on_table(state, 5)


@pytest.mark.parametrize("facing, expected", [
    (Direction.NORTH, (2, 3)),
    (Direction.EAST, (3, 2)),
    (Direction.SOUTH, (2, 1)),
    (Direction.WEST, (1, 2)),
])
def test_move_follows_facing(facing, expected):
    state = RobotState(Position(2, 2), facing)
    moved = move(state)
    assert moved.position == expected
    assert moved.facing is facing
    # Pure: the original snapshot is untouched
    assert state.position == (2, 2)


def test_move_does_not_judge_bounds():
    state = RobotState(Position(0, 0), Direction.SOUTH)
    assert move(state).position == (0, -1)


def test_turns_keep_position():
    state = RobotState(Position(1, 2), Direction.EAST)
    assert turn_left(state) == RobotState(Position(1, 2), Direction.NORTH)
    assert turn_right(state) == RobotState(Position(1, 2), Direction.SOUTH)


def test_place_is_unconditional():
    state = RobotState(Position(3, 3), Direction.WEST)
    placed = place(state, 9, -4, Direction.SOUTH)
    assert placed == RobotState(Position(9, -4), Direction.SOUTH)


@pytest.mark.parametrize("x, y, on_table", [
    (0, 0, True),
    (4, 4, True),
    (0, 4, True),
    (5, 0, False),
    (0, 5, False),
    (-1, 0, False),
    (0, -1, False),
    (-1, -1, False),
])
def test_is_on_table_bounds(x, y, on_table):
    state = RobotState(Position(x, y), Direction.NORTH)
    assert is_on_table(state, 5) is on_table
    assert state.is_on_table(5) is on_table


def test_is_on_table_respects_table_size():
    state = RobotState(Position(7, 7), Direction.NORTH)
    assert not is_on_table(state, 5)
    assert is_on_table(state, 8)


def test_format_report():
    state = RobotState(Position(0, 1), Direction.NORTH)
    assert format_report(state) == "0,1,NORTH"
    assert str(RobotState(Position(3, 3), Direction.WEST)) == "3,3,WEST"


def test_state_is_immutable():
    state = initial_state()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.facing = Direction.EAST  # type: ignore[misc]
