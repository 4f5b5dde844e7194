from __future__ import annotations

"""
Log Severity Levels.

Models the eight host severities (syslog numbering, EMERGENCY=0 to
DEBUG=7) and maps them onto the numeric scale of the file channel.
"""

from enum import IntEnum
from typing import Union

from rotating_log_writer.domain.constants import SEVERITY_SCALE
from rotating_log_writer.domain.errors import InvalidLogLevelError


class LogLevel(IntEnum):
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


LevelLike = Union[LogLevel, int, str]


def normalize_level(level: LevelLike) -> LogLevel:
    """
    Convert a host level value into a LogLevel member.

    Accepts LogLevel members, their integer values and case-insensitive
    level names (PSR-3 style strings such as "warning").

    Raises:
        InvalidLogLevelError: If the value does not denote a known level.
    """
    if isinstance(level, LogLevel):
        return level

    # bool is an int subclass; True must not silently become ALERT
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return LogLevel(level)
        except ValueError:
            pass
    elif isinstance(level, str):
        member = LogLevel.__members__.get(level.strip().upper())
        if member is not None:
            return member

    raise InvalidLogLevelError(f'Invalid log level "{level!r}"')


def get_level_name(level: LevelLike) -> str:
    """Return the upper-case name of a level, e.g. "ERROR"."""
    return normalize_level(level).name


def to_severity(level: LevelLike) -> int:
    """Map a host level onto the file channel's severity scale (DEBUG=100 ... EMERGENCY=600)."""
    return SEVERITY_SCALE[normalize_level(level).name]
