"""
Base abstractions and helpers for command implementations.
"""
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Tuple
from abc import ABC, abstractmethod
from enum import Enum
import logging
import re

from toyrobot.config import TRACE
from toyrobot.protocol.types import Direction, name_to_direction
from toyrobot.server.state import RobotState
from toyrobot.utils.errors import CommandError, InvalidDirectionName, UnrecognizedCommand


logger = logging.getLogger(__name__)


class ExecutionStatusCode(Enum):
    """Enumeration for command execution status codes."""
    COMPLETED = "COMPLETED"  # candidate state committed
    IGNORED = "IGNORED"      # gated while off the table
    REJECTED = "REJECTED"    # candidate off the table, rolled back
    INVALID = "INVALID"      # unrecognized command or bad arguments
    FAILED = "FAILED"        # unexpected error during execution


@dataclass
class ExecutionStatus:
    """
    Status returned from command execution.

    ``state`` is the candidate produced by the command; the controller decides
    whether it is committed. ``output`` is the line to emit, if any.
    """
    code: ExecutionStatusCode
    message: str
    state: Optional[RobotState] = None
    output: Optional[str] = None
    error: Optional[Exception] = None
    error_type: Optional[str] = None

    @classmethod
    def completed(cls, message: str = "Completed", state: Optional[RobotState] = None,
                  output: Optional[str] = None) -> "ExecutionStatus":
        return cls(ExecutionStatusCode.COMPLETED, message, state=state, output=output)

    @classmethod
    def ignored(cls, message: str = "Ignored") -> "ExecutionStatus":
        return cls(ExecutionStatusCode.IGNORED, message)

    @classmethod
    def rejected(cls, message: str, error: Optional[Exception] = None) -> "ExecutionStatus":
        et = type(error).__name__ if error is not None else None
        return cls(ExecutionStatusCode.REJECTED, message, error=error, error_type=et)

    @classmethod
    def invalid(cls, message: str, output: Optional[str] = None,
                error: Optional[Exception] = None) -> "ExecutionStatus":
        et = type(error).__name__ if error is not None else None
        return cls(ExecutionStatusCode.INVALID, message, output=output, error=error, error_type=et)

    @classmethod
    def failed(cls, message: str, error: Optional[Exception] = None) -> "ExecutionStatus":
        et = type(error).__name__ if error is not None else None
        return cls(ExecutionStatusCode.FAILED, message, error=error, error_type=et)


# Parsing utilities (lightweight, shared)

# Coordinates are 32-bit signed integers
INT_MIN: int = -(2 ** 31)
INT_MAX: int = 2 ** 31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(token: Any) -> Optional[int]:
    """
    Parse the leading signed base-10 integer of a token.

    Text after the digits is ignored ("12abc" -> 12, "2.9" -> 2). Returns None
    if the token does not start with an integer or the value overflows 32 bits.
    """
    t = str(token or "").strip()
    m = _INT_PATTERN.match(t)
    if m is None:
        return None
    value = int(m.group(0))
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_direction(token: Any) -> Optional[Direction]:
    """Parse a compass point name; None if the token is not one."""
    try:
        return name_to_direction(str(token or ""))
    except InvalidDirectionName:
        return None


class CommandBase(ABC):
    """
    Reusable base for commands with shared matching and lifecycle helpers.
    """
    # Set by @register_command decorator
    _registered_name: ClassVar[str] = ""
    # Number of tokens expected after the command name
    ARITY: ClassVar[int] = 0

    __slots__ = ("is_valid", "is_finished", "error_state", "error_message")

    def __init__(self) -> None:
        self.is_valid: bool = True
        self.is_finished: bool = False
        self.error_state: bool = False
        self.error_message: str = ""

    def __hash__(self) -> int:
        return id(self)

    @property
    def name(self) -> str:
        return self._registered_name or type(self).__name__

    # Logging helpers (uniform, include command identity)
    def log_trace(self, msg: str, *args: Any) -> None:
        logger.log(TRACE, "[%s] " + msg, self.name, *args)

    def log_debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self.name, *args)

    def log_error(self, msg: str, *args: Any) -> None:
        logger.error("[%s] " + msg, self.name, *args)

    def do_match(self, args: List[str]) -> None:
        """
        Parse command arguments into instance attributes.

        Args:
            args: Tokens after the command name, already arity-checked

        Raises:
            CommandError: If an argument cannot be parsed
        """
        return

    def match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Check arity and parse arguments from pre-split tokens.

        Args:
            parts: Tokens including the command name (e.g., ['PLACE', '1', '2', 'NORTH'])

        Returns:
            Tuple of (can_handle, error_message)
            - can_handle: True if the tokens form a valid command
            - error_message: User-visible message when they do not
        """
        args = parts[1:]
        try:
            if len(args) != self.ARITY:
                raise UnrecognizedCommand(self.name, len(args))
            self.do_match(args)
        except CommandError as e:
            self.fail(e.original_message)
            return False, e.user_message
        return True, None

    @abstractmethod
    def execute_step(self, state: RobotState) -> ExecutionStatus:
        """
        Apply the command to a state snapshot.

        Returns:
            ExecutionStatus whose ``state`` is the candidate next state
        """
        raise NotImplementedError

    def tick(self, state: RobotState) -> ExecutionStatus:
        """
        Template-method wrapper that centralizes lifecycle/error handling and calls execute_step().
        Controllers should prefer tick() over calling execute_step() directly.
        """
        if self.is_finished or not self.is_valid:
            return ExecutionStatus.failed("Already finished" if self.is_finished else "Invalid command")
        try:
            status = self.execute_step(state)
        except Exception as e:
            self.fail(str(e))
            self.log_error("Execution error: %s", e)
            return ExecutionStatus.failed("Execution error", error=e)
        self.finish()
        return status

    # ----- lifecycle helpers -----

    def finish(self) -> None:
        """Mark command as finished."""
        self.is_finished = True

    def fail(self, message: str) -> None:
        """Mark command as invalid/failed with an error message."""
        self.is_valid = False
        self.error_state = True
        self.error_message = message
        self.is_finished = True


class MotionCommand(CommandBase):
    """
    Base class for commands that produce a new candidate state.

    Subclasses implement transition(); the controller commits the result only
    if it lies on the table.
    """

    @abstractmethod
    def transition(self, state: RobotState) -> RobotState:
        raise NotImplementedError

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        candidate = self.transition(state)
        self.log_trace("candidate %s", candidate)
        return ExecutionStatus.completed(f"{self.name} applied", state=candidate)


class QueryCommand(CommandBase):
    """
    Base class for read-only commands that report on the robot state.

    Query commands never change state; their candidate is the current snapshot.
    """

    @abstractmethod
    def render(self, state: RobotState) -> str:
        raise NotImplementedError

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        return ExecutionStatus.completed(f"{self.name} sent", state=state, output=self.render(state))
