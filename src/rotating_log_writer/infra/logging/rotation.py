from __future__ import annotations

"""
Date-Rotated Log File.

Owns the physical stream of one log file family. Lines are appended to a
file stamped with the local date of the record. Rotation only moves
forward: when a record carries a later date the current file is sealed,
the next one is opened and sealed files beyond the retention bound are
deleted, oldest first. Records dated before the active file go to the
active file.

File naming for a configured '/var/log/app.log':
- with date subfolder:    /var/log/2026/10/2026-10-19-app.log
- without date subfolder: /var/log/2026-10-19-app.log
"""

import glob
import logging
import os
import threading
from datetime import date
from enum import Enum
from typing import IO, List, Optional

from rotating_log_writer.domain.constants import (
    DEFAULT_MAX_RETAINED_FILES,
    DEFAULT_USE_DATE_SUBFOLDER,
    ERR_UNSUPPORTED_STREAM,
)
from rotating_log_writer.domain.errors import (
    InvalidLogWriterConfigurationError,
    LogWriteError,
)
from rotating_log_writer.infra.fs import (
    ensure_parent_dir,
    remove_empty_dirs,
    stream_to_local_path,
)

logger = logging.getLogger(__name__)

_DATE_GLOB = "[0-9][0-9][0-9][0-9]-[0-9][0-9]-[0-9][0-9]"
_YEAR_GLOB = "[0-9][0-9][0-9][0-9]"
_MONTH_GLOB = "[0-9][0-9]"


class FileState(Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    ROTATING = "rotating"
    CLOSED = "closed"


class RotatingLogFile:
    """
    Thread-safe, date-rotated append-only file.

    Args:
        path: Resolved log file path (plain path or 'file://' reference).
        max_retained_files: Sealed files kept besides the active one; 0 keeps all.
        use_date_subfolder: Nest dated files under YYYY/MM/.
        encoding: Text encoding of the file.

    Raises:
        InvalidLogWriterConfigurationError: If path is a non-file stream.
    """

    def __init__(
            self,
            path: str,
            max_retained_files: int = DEFAULT_MAX_RETAINED_FILES,
            use_date_subfolder: bool = DEFAULT_USE_DATE_SUBFOLDER,
            encoding: str = "utf-8",
    ) -> None:
        local_path = stream_to_local_path(path)
        if not local_path:
            raise InvalidLogWriterConfigurationError(
                f'Log file stream "{path}" is not supported, only files can be rotated',
                ERR_UNSUPPORTED_STREAM,
            )

        self.path = path
        self.max_retained_files = max_retained_files
        self.use_date_subfolder = use_date_subfolder
        self.encoding = encoding

        self._base_dir, self._filename = os.path.split(os.path.abspath(local_path))
        self._lock = threading.RLock()
        self._stream: Optional[IO[str]] = None
        self._active_date: Optional[date] = None
        self._active_file: Optional[str] = None
        self._state = FileState.UNOPENED

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def state(self) -> FileState:
        return self._state

    @property
    def active_file(self) -> Optional[str]:
        """Path of the dated file currently written to, None before the first write."""
        return self._active_file

    def has_settings(self, max_retained_files: int, use_date_subfolder: bool) -> bool:
        return (self.max_retained_files == max_retained_files
                and self.use_date_subfolder == use_date_subfolder)

    def dated_filename(self, day: date) -> str:
        """Return the file a record stamped with 'day' belongs to."""
        stamped = f"{day:%Y-%m-%d}-{self._filename}"
        if self.use_date_subfolder:
            return os.path.join(self._base_dir, f"{day:%Y}", f"{day:%m}", stamped)
        return os.path.join(self._base_dir, stamped)

    def list_files(self) -> List[str]:
        """Return all dated files of this family, newest first."""
        parts = [glob.escape(self._base_dir)]
        if self.use_date_subfolder:
            parts += [_YEAR_GLOB, _MONTH_GLOB]
        parts.append(f"{_DATE_GLOB}-{glob.escape(self._filename)}")
        matches = glob.glob(os.path.join(*parts))
        return sorted(matches, key=os.path.basename, reverse=True)

    def write_line(self, line: str, created: float) -> None:
        """
        Append one line, rotating first if the record is dated after the active file.

        Args:
            line: Formatted line without trailing newline.
            created: POSIX timestamp of the record.

        Raises:
            LogWriteError: If the file is closed or the append fails.
        """
        with self._lock:
            if self._state is FileState.CLOSED:
                raise LogWriteError(f"Log file '{self.path}' is closed")

            day = date.fromtimestamp(created)
            # Sealed files never reopen; late records land in the active file
            if self._active_date is None or day > self._active_date:
                self._rotate(day)

            try:
                self._stream.write(line + "\n")
                self._stream.flush()
            except (OSError, ValueError) as e:
                raise LogWriteError(f"Could not write log record to log file '{self._active_file}'") from e

    def close(self) -> None:
        """Close the stream; further writes fail."""
        with self._lock:
            if self._stream is not None:
                self._stream.close()
                self._stream = None
            self._state = FileState.CLOSED
            logger.debug(f"RotatingLogFile: closed {self.path}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _rotate(self, day: date) -> None:
        """Seal the active file (if any) and open the file for 'day'."""
        previous = self._active_file
        if self._stream is not None:
            self._state = FileState.ROTATING
            self._stream.close()
            self._stream = None

        target = self.dated_filename(day)
        try:
            ensure_parent_dir(target)
            self._stream = open(target, "a", encoding=self.encoding)
        except OSError as e:
            self._active_date = None
            self._active_file = None
            self._state = FileState.UNOPENED
            raise LogWriteError(f"Could not open log file '{target}'") from e

        self._active_date = day
        self._active_file = target
        self._state = FileState.OPEN

        if previous:
            logger.info(f"RotatingLogFile: rotated {previous} -> {target}")
        else:
            logger.debug(f"RotatingLogFile: opened {target}")

        self._prune()

    def _prune(self) -> None:
        """Delete sealed files beyond the retention bound, oldest first."""
        if self.max_retained_files == 0:
            return

        active = os.path.normpath(self._active_file or "")
        sealed = [f for f in self.list_files() if os.path.normpath(f) != active]

        for stale in sealed[self.max_retained_files:]:
            try:
                os.remove(stale)
            except OSError as e:
                logger.warning(f"RotatingLogFile: could not delete {stale}: {e}")
                continue
            logger.info(f"RotatingLogFile: pruned {stale}")
            if self.use_date_subfolder:
                remove_empty_dirs(os.path.dirname(stale), self._base_dir)
