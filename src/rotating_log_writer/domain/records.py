from __future__ import annotations

"""
Host Log Record Model.

A read-only view of one record handed over by the host logging framework.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from rotating_log_writer.domain.levels import LevelLike


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable log record as produced by the host framework.

    Attributes:
        level: Host severity (LogLevel, its int value or its name).
        message: Already interpolated message text.
        component: Dotted name of the emitting component.
        request_id: Identifier of the request the record belongs to.
        data: Structured metadata; may hold exception instances.
        created: Creation time as POSIX timestamp.
    """
    level: LevelLike
    message: str
    component: str = ""
    request_id: str = ""
    data: Mapping[str, Any] = field(default_factory=dict)
    created: float = field(default_factory=time.time)
