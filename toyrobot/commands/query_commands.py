"""
Query commands that report the robot state without changing it.
"""

from toyrobot.commands.base import QueryCommand
from toyrobot.server.command_registry import register_command
from toyrobot.server.state import RobotState, format_report


@register_command("REPORT")
class ReportCommand(QueryCommand):
    """Report position and facing as x,y,DIRECTION."""

    def render(self, state: RobotState) -> str:
        return format_report(state)
