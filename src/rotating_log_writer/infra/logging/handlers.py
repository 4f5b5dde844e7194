from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the handler bridging a writer's private logging channel to a
shared RotatingLogFile, and the tagging helpers used to tell our own
handlers apart from anything else attached to a logger.
"""

import logging
import sys

from rotating_log_writer.domain.errors import LogWriteError
from rotating_log_writer.infra.logging.rotation import RotatingLogFile

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_rotating_log_writer_handler"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as managed by this package.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was created by this package.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# HANDLERS
# ==============================================================================

class SharedFileHandler(logging.Handler):
    """
    Handler appending formatted records to a shared RotatingLogFile.

    Unlike stdlib handlers, failures propagate to the caller as
    LogWriteError instead of being printed to stderr.
    """

    def __init__(self, log_file: RotatingLogFile, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.log_file = log_file
        _tag_handler(self)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            self.log_file.write_line(line, getattr(record, "host_created", record.created))
        except Exception:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        if isinstance(exc, LogWriteError):
            raise exc
        raise LogWriteError(
            f"Could not write log record to log file '{self.log_file.path}'"
        ) from exc
