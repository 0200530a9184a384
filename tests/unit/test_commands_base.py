import pytest

from toyrobot.commands.base import (
    CommandBase,
    ExecutionStatus,
    ExecutionStatusCode,
    MotionCommand,
    parse_direction,
    parse_int,
)
from toyrobot.protocol.types import Direction
from toyrobot.server.state import initial_state


class DummyCommand(CommandBase):
    ARITY = 1

    def do_match(self, args):
        self.arg = args[0]

    def execute_step(self, state) -> ExecutionStatus:
        return ExecutionStatus.completed("ok", state=state)


class ExplodingCommand(MotionCommand):
    def transition(self, state):
        raise RuntimeError("boom")


@pytest.mark.parametrize("token, expected", [
    ("12", 12),
    ("0", 0),
    ("-3", -3),
    ("+4", 4),
    ("007", 7),
    ("-2147483648", -2147483648),
    ("2147483647", 2147483647),
])
def test_parse_int_accepts_base10(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token, expected", [
    ("12abc", 12),
    ("2.9", 2),
    ("1.0", 1),
    ("0x10", 0),
    ("1_000", 1),
    ("-7WEST", -7),
])
def test_parse_int_ignores_text_after_digits(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token", ["", "abc", "x1", ".5", "--1", "+", "-", "2147483648", "-2147483649", "99999999999abc"])
def test_parse_int_rejects(token):
    assert parse_int(token) is None


def test_parse_direction():
    assert parse_direction("WEST") is Direction.WEST
    assert parse_direction("NORTHX") is None
    assert parse_direction(None) is None


def test_match_checks_arity():
    cmd = DummyCommand()
    ok, err = cmd.match(["DUMMY"])
    assert ok is False
    assert err == "Unknown command or invalid argument count."
    assert cmd.is_valid is False
    assert cmd.error_state is True

    cmd = DummyCommand()
    ok, err = cmd.match(["DUMMY", "X"])
    assert (ok, err) == (True, None)
    assert cmd.arg == "X"


def test_lifecycle_flags():
    cmd = DummyCommand()
    assert cmd.is_valid is True
    assert cmd.is_finished is False
    assert cmd.error_message == ""

    status = cmd.tick(initial_state())
    assert status.code is ExecutionStatusCode.COMPLETED
    assert cmd.is_finished is True

    # A finished command does not run twice
    again = cmd.tick(initial_state())
    assert again.code is ExecutionStatusCode.FAILED


def test_tick_captures_execution_errors():
    cmd = ExplodingCommand()
    status = cmd.tick(initial_state())
    assert status.code is ExecutionStatusCode.FAILED
    assert status.state is None
    assert status.error_type == "RuntimeError"
    assert cmd.is_valid is False
    assert cmd.error_message == "boom"


def test_name_falls_back_to_class_name():
    assert DummyCommand().name == "DummyCommand"
