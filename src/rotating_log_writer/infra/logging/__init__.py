from __future__ import annotations

from .formatter import LineFormatter, normalize_metadata
from .handlers import SharedFileHandler
from .registry import LogFileRegistry, default_registry
from .rotation import FileState, RotatingLogFile

__all__ = [
    "FileState",
    "LineFormatter",
    "LogFileRegistry",
    "RotatingLogFile",
    "SharedFileHandler",
    "default_registry",
    "normalize_metadata",
]
