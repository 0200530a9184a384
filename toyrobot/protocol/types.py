"""
Type definitions for the toyrobot command protocol.

Defines the compass Direction enum and the degree arithmetic between facings.
"""

from enum import IntEnum

import numpy as np

from toyrobot.protocol.tokenizer import ASCII_WHITESPACE, ascii_upper
from toyrobot.utils.errors import InvalidDirectionName

# Distance in degrees between adjacent compass points
COMPASS_POINT_SEPARATION: int = 90

# Full turn; also equivalent to zero
COMPASS_POINT_MAX: int = 360


class Direction(IntEnum):
    """Compass facing. The value is the heading in degrees, clockwise from north."""

    NORTH = 0
    EAST = 90
    SOUTH = 180
    WEST = 270

    @property
    def degrees(self) -> int:
        return int(self.value)

    @property
    def step(self) -> tuple[int, int]:
        """Unit (dx, dy) displacement for one move along this facing."""
        return HEADING_STEPS[self]

    @classmethod
    def from_degrees(cls, degrees: int) -> "Direction":
        """Map any multiple of 90 degrees onto its compass point."""
        if degrees % COMPASS_POINT_SEPARATION != 0:
            raise ValueError(f"Not a compass heading: {degrees}")
        return cls(degrees % COMPASS_POINT_MAX)


def _heading_step(degrees: int) -> tuple[int, int]:
    # North is +y and east is +x, so x follows sin and y follows cos
    theta = np.deg2rad(degrees)
    return int(np.rint(np.sin(theta))), int(np.rint(np.cos(theta)))


HEADING_STEPS: dict[Direction, tuple[int, int]] = {
    direction: _heading_step(direction.degrees) for direction in Direction
}


def name_to_direction(name: str) -> Direction:
    """
    Transform a direction name to its Direction value.

    Args:
        name: Direction name, any case (e.g. "north", "WEST")

    Returns:
        The matching Direction

    Raises:
        InvalidDirectionName: If the name is not one of the four compass points
    """
    try:
        return Direction[ascii_upper(name.strip(ASCII_WHITESPACE))]
    except KeyError:
        raise InvalidDirectionName(name) from None


def direction_to_name(direction: Direction) -> str:
    """Transform a Direction to its uppercase name."""
    return Direction(direction).name


def turn(direction: Direction, delta: int) -> Direction:
    """
    Rotate a facing by a signed number of degrees.

    Args:
        direction: Current facing
        delta: Rotation in degrees; negative turns left, positive turns right.
            Must be a multiple of 90.

    Returns:
        The resulting facing, normalized into [0, 360)
    """
    if delta % COMPASS_POINT_SEPARATION != 0:
        raise ValueError(f"Turn angle must be a multiple of {COMPASS_POINT_SEPARATION}: {delta}")
    return Direction.from_degrees(direction.degrees + delta)
