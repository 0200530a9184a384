"""
Custom exception types for the toyrobot command pipeline.

Every error here is recoverable: the interpreter absorbs it and moves on to
the next input line. ``user_message`` is the text written to the output
stream, or None when the error is silent.
"""

from toyrobot.config import INVALID_ARGUMENTS_MESSAGE, UNKNOWN_COMMAND_MESSAGE


class CommandError(ValueError):
    """Base class for per-command failures."""

    user_message: str | None = None

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(message)


class InvalidArgumentError(CommandError):
    """A recognized command received an argument it cannot parse."""

    user_message = INVALID_ARGUMENTS_MESSAGE


class InvalidIntegerArgument(InvalidArgumentError):
    """X or Y token is not a base-10 integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid integer argument: {token!r}")


class InvalidDirectionName(InvalidArgumentError):
    """Direction token is not one of NORTH, EAST, SOUTH, WEST."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid direction: {name!r}")


class UnrecognizedCommand(CommandError):
    """Unknown command name, or a known name with the wrong argument count."""

    user_message = UNKNOWN_COMMAND_MESSAGE

    def __init__(self, name: str, arg_count: int):
        self.name = name
        self.arg_count = arg_count
        super().__init__(f"Unknown command or invalid argument count: {name} ({arg_count} args)")


class OffTableAfterTransition(CommandError):
    """A transition produced a position outside the table; rolled back silently."""

    def __init__(self, x: int, y: int, table_size: int):
        self.x = x
        self.y = y
        self.table_size = table_size
        super().__init__(f"Position ({x}, {y}) is off the {table_size}x{table_size} table")
