from __future__ import annotations

"""
Shared Log File Registry.

Writers resolving to the same path share one RotatingLogFile. The
registry counts references per path and closes the file when the last
writer releases it. 'default_registry' is the process-wide instance;
writers accept another registry for isolation (e.g. in tests).
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import Dict

from rotating_log_writer.domain.constants import ERR_ROTATION_CONFLICT
from rotating_log_writer.domain.errors import InvalidLogWriterConfigurationError
from rotating_log_writer.infra.fs import stream_to_local_path
from rotating_log_writer.infra.logging.rotation import RotatingLogFile

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    log_file: RotatingLogFile
    refcount: int = 0


class LogFileRegistry:
    """Reference-counted mapping of resolved path -> RotatingLogFile."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, _Entry] = {}

    def acquire(
            self,
            path: str,
            max_retained_files: int,
            use_date_subfolder: bool,
    ) -> RotatingLogFile:
        """
        Return the shared file for path, creating it on first use.

        Raises:
            InvalidLogWriterConfigurationError: If the path is already shared
                with different rotation settings, or cannot be rotated.
        """
        key = registry_key(path)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = _Entry(RotatingLogFile(path, max_retained_files, use_date_subfolder))
                self._entries[key] = entry
                logger.debug(f"LogFileRegistry: registered {key}")
            elif not entry.log_file.has_settings(max_retained_files, use_date_subfolder):
                raise InvalidLogWriterConfigurationError(
                    f'Log file "{path}" is already in use with different rotation settings',
                    ERR_ROTATION_CONFLICT,
                )
            entry.refcount += 1
            return entry.log_file

    def release(self, path: str) -> None:
        """Drop one reference; closes the file when none remain."""
        key = registry_key(path)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.warning(f"LogFileRegistry: release of unregistered path {key}")
                return
            entry.refcount -= 1
            if entry.refcount > 0:
                return
            del self._entries[key]
        entry.log_file.close()
        logger.debug(f"LogFileRegistry: released last reference to {key}")

    def refcount(self, path: str) -> int:
        with self._lock:
            entry = self._entries.get(registry_key(path))
            return entry.refcount if entry else 0

    def close_all(self) -> None:
        """Close every registered file regardless of outstanding references."""
        with self._lock:
            entries = list(self._entries.values())
            self._entries.clear()
        for entry in entries:
            entry.log_file.close()

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return registry_key(path) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def registry_key(path: str) -> str:
    """Normalize a resolved path so equivalent spellings share one entry."""
    local_path = stream_to_local_path(path)
    if not local_path:
        return path
    return os.path.normcase(os.path.abspath(local_path))


default_registry = LogFileRegistry()
