"""
Motion commands: PLACE, MOVE, LEFT, RIGHT.
"""

from typing import List

from toyrobot.commands.base import MotionCommand, parse_direction, parse_int
from toyrobot.protocol.types import Direction
from toyrobot.server.command_registry import register_command
from toyrobot.server.state import RobotState, move, place, turn_left, turn_right
from toyrobot.utils.errors import InvalidDirectionName, InvalidIntegerArgument


@register_command("PLACE")
class PlaceCommand(MotionCommand):
    """Put the robot at X,Y facing F."""
    ARITY = 3

    def __init__(self) -> None:
        super().__init__()
        self.x: int = 0
        self.y: int = 0
        self.direction: Direction = Direction.NORTH

    def do_match(self, args: List[str]) -> None:
        """Parse X, Y and F; any failure collapses into one invalid-arguments error."""
        x_tok, y_tok, f_tok = args
        x = parse_int(x_tok)
        if x is None:
            raise InvalidIntegerArgument(x_tok)
        y = parse_int(y_tok)
        if y is None:
            raise InvalidIntegerArgument(y_tok)
        direction = parse_direction(f_tok)
        if direction is None:
            raise InvalidDirectionName(f_tok)
        self.x, self.y, self.direction = x, y, direction

    def transition(self, state: RobotState) -> RobotState:
        return place(state, self.x, self.y, self.direction)


@register_command("MOVE")
class MoveCommand(MotionCommand):
    """Move one unit forward."""

    def transition(self, state: RobotState) -> RobotState:
        return move(state)


@register_command("LEFT")
class LeftCommand(MotionCommand):
    """Rotate 90 degrees counter-clockwise."""

    def transition(self, state: RobotState) -> RobotState:
        return turn_left(state)


@register_command("RIGHT")
class RightCommand(MotionCommand):
    """Rotate 90 degrees clockwise."""

    def transition(self, state: RobotState) -> RobotState:
        return turn_right(state)
