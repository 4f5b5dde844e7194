from __future__ import annotations

from .domain.config import WriterConfig
from .domain.errors import (
    InvalidLogLevelError,
    InvalidLogWriterConfigurationError,
    LogWriteError,
    LogWriterError,
)
from .domain.levels import LogLevel, get_level_name, normalize_level
from .domain.records import LogRecord
from .infra.environment import Environment
from .infra.logging import LogFileRegistry, default_registry
from .writer import LogWriter, RotatingFileLogWriter

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "InvalidLogLevelError",
    "InvalidLogWriterConfigurationError",
    "LogFileRegistry",
    "LogLevel",
    "LogRecord",
    "LogWriteError",
    "LogWriter",
    "LogWriterError",
    "RotatingFileLogWriter",
    "WriterConfig",
    "default_registry",
    "get_level_name",
    "normalize_level",
]
