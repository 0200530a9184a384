"""
Central configuration for toyrobot tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("TOYROBOT_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"

DEFAULT_TABLE_SIZE: int = 5

# Initial robot position; guaranteed to be off any table.
OFF_TABLE_X: int = -1
OFF_TABLE_Y: int = -1

# User-visible messages written to the output stream
INVALID_ARGUMENTS_MESSAGE: str = "One or more invalid arguments."
UNKNOWN_COMMAND_MESSAGE: str = "Unknown command or invalid argument count."


def _parse_table_size() -> int:
    raw = os.getenv("TOYROBOT_TABLE_SIZE")
    if not raw:
        return DEFAULT_TABLE_SIZE
    try:
        size = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid TOYROBOT_TABLE_SIZE={raw!r}")
        return DEFAULT_TABLE_SIZE
    if size <= 0:
        logger.warning(f"Ignoring non-positive TOYROBOT_TABLE_SIZE={raw!r}")
        return DEFAULT_TABLE_SIZE
    return size


# Table size in units (overridable via env "TOYROBOT_TABLE_SIZE")
TABLE_SIZE: int = _parse_table_size()
