from __future__ import annotations

"""
Rotating File Log Writer.

Plugs the host framework's log records into the stdlib logging machinery:
every writer owns a private, non-propagating channel whose single handler
appends formatted lines to a date-rotated file shared, per resolved path,
through a reference-counted registry.
"""

import logging
import os
from typing import Any, Mapping, Optional, Protocol, Union

from rotating_log_writer.domain.config import WriterConfig
from rotating_log_writer.domain.constants import (
    CHANNEL_NAME,
    DEFAULT_LOG_FILE_HMAC_SECRET,
    DEFAULT_LOG_FILE_TEMPLATE,
    DEFAULT_LOG_FILE_TOKEN_LENGTH,
    ERR_INVALID_LOG_PATH,
    ERR_PATH_LOCKED,
)
from rotating_log_writer.domain.errors import (
    InvalidLogWriterConfigurationError,
    LogWriteError,
)
from rotating_log_writer.domain.levels import normalize_level, to_severity
from rotating_log_writer.domain.records import LogRecord
from rotating_log_writer.infra.environment import Environment
from rotating_log_writer.infra.fs import resolve_log_file_path
from rotating_log_writer.infra.hashing import hmac
from rotating_log_writer.infra.logging.formatter import LineFormatter
from rotating_log_writer.infra.logging.handlers import SharedFileHandler, _is_our_handler
from rotating_log_writer.infra.logging.registry import LogFileRegistry, default_registry

logger = logging.getLogger(__name__)


class LogWriter(Protocol):
    """Capability of persisting host log records."""

    def write_log(self, record: LogRecord) -> "LogWriter":
        ...


class RotatingFileLogWriter:
    """
    Log writer appending records to a daily rotated file.

    The log file path is resolved once, at construction. It may only be
    changed through set_log_file() or set_log_file_infix() before the
    first record was written.

    Args:
        options: WriterConfig or host option mapping.
        environment: Installation paths and secret; read from the process
            environment when omitted.
        registry: Shared file registry; the process-wide one when omitted.

    Raises:
        InvalidLogWriterConfigurationError: On bad options or an
            unresolvable log file path.
    """

    def __init__(
            self,
            options: Union[WriterConfig, Mapping[str, Any], None] = None,
            *,
            environment: Optional[Environment] = None,
            registry: Optional[LogFileRegistry] = None,
    ) -> None:
        if isinstance(options, WriterConfig):
            self._config = options
        else:
            self._config = WriterConfig.from_options(options)

        self._environment = environment or Environment.from_environ()
        self._registry = default_registry if registry is None else registry
        self._log_file_infix = self._config.log_file_infix
        self._explicit_path = self._config.log_file_path is not None

        self._log_file = ""
        self._handler: Optional[SharedFileHandler] = None
        self._written = False
        self._closed = False

        # Private channel: never registered with logging.getLogger(), no parent
        self._channel = logging.Logger(CHANNEL_NAME)
        self._channel.propagate = False

        self._attach(self._config.log_file_path or self.get_default_log_file_name())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def config(self) -> WriterConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def get_log_file(self) -> str:
        """Return the resolved path of the log file."""
        return self._log_file

    def set_log_file(self, path: str) -> "RotatingFileLogWriter":
        """
        Point the writer at another log file.

        Args:
            path: Absolute path, 'file://' reference or path relative to
                the project path.

        Raises:
            InvalidLogWriterConfigurationError: If the path is invalid or
                records were already written.
        """
        self._ensure_path_mutable()
        self._attach(path)
        self._explicit_path = True
        return self

    def set_log_file_infix(self, infix: str) -> "RotatingFileLogWriter":
        """Set the infix of the derived default filename."""
        if infix == self._log_file_infix:
            return self
        if not self._explicit_path:
            self._ensure_path_mutable()
        self._log_file_infix = infix
        if not self._explicit_path:
            self._attach(self.get_default_log_file_name())
        return self

    def get_default_log_file_name(self) -> str:
        """
        Derive the default log file path under the variable-data root.

        The %s placeholder of the template is replaced with a short HMAC
        token of the template keyed with the installation secret, so the
        name is stable across restarts of the same installation.

        Returns:
            str: e.g. '<var_path>/log/monolog_<infix>_<token>.log'.
        """
        token = hmac(
            DEFAULT_LOG_FILE_TEMPLATE,
            DEFAULT_LOG_FILE_HMAC_SECRET,
            self._environment.encryption_key,
        )[:DEFAULT_LOG_FILE_TOKEN_LENGTH]
        if self._log_file_infix != "":
            token = f"{self._log_file_infix}_{token}"
        return os.path.normpath(self._environment.var_path + DEFAULT_LOG_FILE_TEMPLATE % token)

    def write_log(self, record: LogRecord) -> "RotatingFileLogWriter":
        """
        Append one record as a single formatted line.

        Args:
            record: Host log record.

        Returns:
            RotatingFileLogWriter: self, for chaining.

        Raises:
            InvalidLogLevelError: If record.level is not a known severity.
            LogWriteError: If the writer is closed or the append fails.
        """
        if self._closed:
            raise LogWriteError(f"Log writer for '{self._log_file}' is closed")

        level = normalize_level(record.level)
        extra = {
            "host_created": float(record.created),
            "host_level_name": level.name,
            "request_id": record.request_id,
            "component": record.component,
            "host_data": record.data,
        }

        # handle() instead of log(): logging.disable() must not drop records
        log_record = self._channel.makeRecord(
            self._channel.name, to_severity(level), "", 0,
            str(record.message), None, None, extra=extra,
        )
        self._channel.handle(log_record)
        self._written = True
        return self

    def close(self) -> None:
        """Release the shared log file; it is closed once no writer uses it."""
        if self._closed:
            return
        self._closed = True
        self._detach()
        logger.debug(f"RotatingFileLogWriter: closed writer for {self._log_file}")

    def __enter__(self) -> "RotatingFileLogWriter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_path_mutable(self) -> None:
        if self._closed or self._written:
            raise InvalidLogWriterConfigurationError(
                f'Log file "{self._log_file}" can no longer be changed',
                ERR_PATH_LOCKED,
            )

    def _attach(self, path: str) -> None:
        """Resolve path, acquire its shared file and swap in a new handler."""
        resolved = resolve_log_file_path(path, self._environment.project_path)
        if not resolved:
            raise InvalidLogWriterConfigurationError(
                f'Log file path "{path}" is not valid!',
                ERR_INVALID_LOG_PATH,
            )

        shared_file = self._registry.acquire(
            resolved,
            self._config.max_retained_files,
            self._config.use_date_subfolder,
        )

        handler = SharedFileHandler(shared_file)
        handler.setFormatter(LineFormatter(self._config.suppress_empty_metadata))

        self._detach()
        self._channel.addHandler(handler)
        self._handler = handler
        self._log_file = resolved
        logger.debug(f"RotatingFileLogWriter: writing to {resolved}")

    def _detach(self) -> None:
        """Remove our handler from the channel and drop the registry reference."""
        for h in list(self._channel.handlers):
            if _is_our_handler(h):
                self._channel.removeHandler(h)
                h.close()
        if self._handler is not None:
            self._registry.release(self._log_file)
            self._handler = None
