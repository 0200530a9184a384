"""
Command interpreter for the toy robot.

Reads tokenized commands, gates them until the robot is on the table,
dispatches through the command registry, and commits or rolls back each
candidate state against the table bounds.
"""

from __future__ import annotations

import argparse
import contextlib
import io
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from toyrobot import config as cfg
from toyrobot.commands.base import ExecutionStatus
from toyrobot.server.command_registry import create_command_from_parts
from toyrobot.server.reader import CommandReader
from toyrobot.server.state import RobotState, initial_state, is_on_table
from toyrobot.utils.errors import OffTableAfterTransition, UnrecognizedCommand

logger = logging.getLogger(__name__)

# The only command accepted while the robot is off the table
PLACE_COMMAND = "PLACE"


@dataclass
class ControllerConfig:
    """Configuration for the controller."""
    table_size: int = cfg.TABLE_SIZE

    def __post_init__(self):
        if self.table_size <= 0:
            raise ValueError(f"Table size must be positive, got {self.table_size}")


class Controller:
    """
    Read-evaluate loop driving a single robot.

    Output lines (reports and error messages) are written to ``output`` in
    processing order; diagnostics go to the logger only.
    """

    def __init__(self, config: ControllerConfig | None = None, output: TextIO | None = None):
        """
        Initialize the controller.

        Args:
            config: Table configuration; defaults to ControllerConfig()
            output: Writable text sink; defaults to sys.stdout
        """
        self.config = config or ControllerConfig()
        self.output = output if output is not None else sys.stdout
        self._state: RobotState = initial_state()
        self.commands_processed: int = 0

    @property
    def state(self) -> RobotState:
        return self._state

    @property
    def is_placed(self) -> bool:
        return self.on_table(self._state)

    def on_table(self, state: RobotState) -> bool:
        return is_on_table(state, self.config.table_size)

    def emit(self, line: str) -> None:
        self.output.write(line + "\n")
        self.output.flush()

    def process(self, tokens: list[str]) -> ExecutionStatus:
        """
        Process one tokenized command line.

        Args:
            tokens: Non-empty uppercase tokens, command name first

        Returns:
            ExecutionStatus describing what happened to the command
        """
        self.commands_processed += 1
        status = self._process(tokens)
        if status.output is not None:
            self.emit(status.output)
        logger.log(cfg.TRACE, "%s -> %s %s", tokens, status.code.value, status.message)
        return status

    def _process(self, tokens: list[str]) -> ExecutionStatus:
        if not tokens:
            return ExecutionStatus.ignored("Empty command")

        name = tokens[0]
        if not self.is_placed and name != PLACE_COMMAND:
            return ExecutionStatus.ignored(f"{name} ignored until the robot is placed")

        command, error = create_command_from_parts(tokens)
        if command is None:
            if error is None:
                # Unknown command name
                exc = UnrecognizedCommand(name, len(tokens) - 1)
                return ExecutionStatus.invalid(str(exc), output=exc.user_message, error=exc)
            return ExecutionStatus.invalid(f"{name} rejected", output=error)

        status = command.tick(self._state)
        if status.state is None:
            # Failed inside the command; state unchanged
            return status

        candidate = status.state
        if not self.on_table(candidate):
            exc = OffTableAfterTransition(candidate.x, candidate.y, self.config.table_size)
            logger.debug(f"Rolled back {command.name}: {exc}")
            return ExecutionStatus.rejected(f"{command.name} rolled back", error=exc)

        self._state = candidate
        return status

    def run(self, source: Iterable[str]) -> int:
        """
        Process commands until the source is exhausted.

        Args:
            source: Iterable of raw text lines

        Returns:
            Number of commands processed
        """
        reader = CommandReader(source)
        processed = 0
        for tokens in reader:
            self.process(tokens)
            processed += 1
        logger.info(f"Processed {processed} commands from {reader.line_count} lines")
        return processed


def run_commands(commands: str | Iterable[str], table_size: int = cfg.TABLE_SIZE) -> list[str]:
    """
    Run a command script against a fresh robot.

    Args:
        commands: Either a string with newlines or an iterable of lines
        table_size: Table size in units

    Returns:
        Emitted output lines, in order
    """
    lines = commands.splitlines() if isinstance(commands, str) else commands
    sink = io.StringIO()
    Controller(ControllerConfig(table_size=table_size), output=sink).run(lines)
    return sink.getvalue().splitlines()


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the simulator."""
    parser = argparse.ArgumentParser(description='Toy robot simulator')
    parser.add_argument('input', nargs='?', help='Command file (default: standard input)')
    parser.add_argument('output', nargs='?', help='Report file (default: standard output)')
    parser.add_argument('--table-size', type=_positive_int, default=cfg.TABLE_SIZE,
                        help=f'Table size in units (default: {cfg.TABLE_SIZE})')

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only log errors')
    parser.add_argument('--log-level', choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set specific log level')
    args = parser.parse_args(argv)

    # Determine log level
    if args.log_level:
        log_level = cfg.TRACE if args.log_level == 'TRACE' else getattr(logging, args.log_level)
    elif args.verbose >= 3 or cfg.TRACE_ENABLED:
        log_level = cfg.TRACE
    elif args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose == 1:
        log_level = logging.INFO
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = getattr(logging, cfg.LOG_LEVEL_DEFAULT)

    logging.basicConfig(
        level=log_level,
        format=cfg.LOG_FORMAT,
        datefmt=cfg.LOG_DATEFMT,
        stream=sys.stderr,
    )

    with contextlib.ExitStack() as stack:
        source: TextIO = sys.stdin
        # Undecodable bytes become U+FFFD and fall through as unknown commands
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        if args.input:
            try:
                source = stack.enter_context(open(args.input, encoding="utf-8", errors="replace"))
            except OSError as e:
                logger.error(f"Error opening input: {args.input}")
                logger.debug(f"Open failed: {e}")
                return 1

        sink: TextIO = sys.stdout
        if args.output:
            try:
                sink = stack.enter_context(open(args.output, "w", encoding="utf-8"))
            except OSError as e:
                logger.error(f"Error opening output: {args.output}")
                logger.debug(f"Open failed: {e}")
                return 1

        logger.info(f"Table size {args.table_size}x{args.table_size}")
        controller = Controller(ControllerConfig(table_size=args.table_size), output=sink)
        controller.run(source)

    return 0


if __name__ == '__main__':
    sys.exit(main())
