"""
Robot state and its pure transitions.

Transitions never judge bounds; they return a candidate state that the
controller commits or discards against the configured table size.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NamedTuple

from toyrobot.config import OFF_TABLE_X, OFF_TABLE_Y
from toyrobot.protocol.types import Direction, direction_to_name, turn


class Position(NamedTuple):
    """Grid coordinates in table units."""

    x: int
    y: int


@dataclass(frozen=True)
class RobotState:
    """
    Immutable snapshot of the robot.

    A position outside the table means the robot has not been placed. The
    initial state uses the (-1, -1) sentinel facing NORTH.
    """

    position: Position = Position(OFF_TABLE_X, OFF_TABLE_Y)
    facing: Direction = Direction.NORTH

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def is_on_table(self, table_size: int) -> bool:
        return is_on_table(self, table_size)

    def __str__(self) -> str:
        return format_report(self)


def initial_state() -> RobotState:
    """State at startup: off the table, facing north."""
    return RobotState()


def is_on_table(state: RobotState, table_size: int) -> bool:
    """True if both coordinates lie in [0, table_size)."""
    return 0 <= state.x < table_size and 0 <= state.y < table_size


def move(state: RobotState) -> RobotState:
    """Advance one unit along the current facing."""
    dx, dy = state.facing.step
    return replace(state, position=Position(state.x + dx, state.y + dy))


def turn_left(state: RobotState) -> RobotState:
    return replace(state, facing=turn(state.facing, -90))


def turn_right(state: RobotState) -> RobotState:
    return replace(state, facing=turn(state.facing, 90))


def place(state: RobotState, x: int, y: int, direction: Direction) -> RobotState:
    """Set position and facing unconditionally."""
    return replace(state, position=Position(x, y), facing=direction)


def format_report(state: RobotState) -> str:
    """Render as ``"x,y,DIRECTION"``."""
    return f"{state.x},{state.y},{direction_to_name(state.facing)}"
