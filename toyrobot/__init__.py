"""
toyrobot Python Package

Simulates a robot on a square table driven by a line-oriented command stream.

Key components:
- Controller: read-evaluate loop with gating, dispatch and rollback
- ControllerConfig: per-instance table size
- run_commands: run a command script and collect the output lines
- Direction / RobotState: compass facings and immutable robot snapshots
"""

from ._version import __version__
from .protocol.types import Direction
from .server.controller import Controller, ControllerConfig, run_commands
from .server.state import Position, RobotState

__all__ = [
    "__version__",
    "Controller",
    "ControllerConfig",
    "run_commands",
    "Direction",
    "Position",
    "RobotState",
]
