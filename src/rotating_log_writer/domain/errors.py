from __future__ import annotations

"""
Writer Error Hierarchy.

Every failure surfaced to the host framework carries a stable numeric
code so callers can react without parsing messages.
"""

from typing import Optional

from rotating_log_writer.domain.constants import (
    ERR_INVALID_LEVEL,
    ERR_INVALID_LOG_PATH,
    ERR_WRITE_FAILED,
)


class LogWriterError(Exception):
    """Base class for all writer errors."""

    default_code: int = 0

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.code = self.default_code if code is None else code

    def __str__(self) -> str:
        return f"{self.args[0]} (code {self.code})"


class InvalidLogWriterConfigurationError(LogWriterError):
    """Raised at construction when options or the log path are unusable."""

    default_code = ERR_INVALID_LOG_PATH


class InvalidLogLevelError(LogWriterError, ValueError):
    """Raised when a record carries a level outside the eight known severities."""

    default_code = ERR_INVALID_LEVEL


class LogWriteError(LogWriterError, RuntimeError):
    """Raised when a line could not be appended to the log file."""

    default_code = ERR_WRITE_FAILED
