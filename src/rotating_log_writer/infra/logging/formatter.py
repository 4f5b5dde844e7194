from __future__ import annotations

"""
Log Line Formatter.

Renders one host record into the single-line text stored in the log
file. Host fields travel on the stdlib LogRecord as extra attributes
set by the writer (host_created, host_level_name, request_id,
component, host_data).
"""

import json
import logging
import traceback
from email.utils import formatdate
from typing import Any, Mapping

LINE_FORMAT = '%s [%s] request="%s" component="%s": %s %s'
METADATA_PREFIX = "- "


class LineFormatter(logging.Formatter):
    """
    Formatter producing '<date> [<LEVEL>] request="<id>" component="<c>": <msg> <data>'.

    Args:
        suppress_empty_metadata: Render nothing instead of '- {}' when a
            record carries no metadata.
    """

    def __init__(self, suppress_empty_metadata: bool = True) -> None:
        super().__init__()
        self.suppress_empty_metadata = suppress_empty_metadata

    def format(self, record: logging.LogRecord) -> str:
        created = getattr(record, "host_created", record.created)
        return LINE_FORMAT % (
            format_timestamp(created),
            getattr(record, "host_level_name", record.levelname),
            getattr(record, "request_id", ""),
            getattr(record, "component", ""),
            record.getMessage(),
            self.format_metadata(getattr(record, "host_data", None)),
        )

    def format_metadata(self, data: Mapping[str, Any] | None) -> str:
        """Serialize record metadata as '- <json>' (or '' when empty and suppressed)."""
        if not data:
            return "" if self.suppress_empty_metadata else METADATA_PREFIX + "{}"
        payload = json.dumps(normalize_metadata(data), separators=(",", ":"), default=str)
        return METADATA_PREFIX + payload


def format_timestamp(created: float) -> str:
    """RFC 2822 local time with numeric offset, e.g. 'Mon, 19 Oct 2026 10:28:00 +0200'."""
    return formatdate(int(created), localtime=True)


def format_exception_text(exc: BaseException) -> str:
    """Human-readable rendering of an exception including its traceback."""
    lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(lines).rstrip("\n")


def normalize_metadata(value: Any) -> Any:
    """
    Prepare metadata for JSON serialization.

    Exceptions, at any nesting depth, become their text rendering.
    Mapping keys are coerced to str and sequences to lists.
    """
    if isinstance(value, BaseException):
        return format_exception_text(value)
    if isinstance(value, Mapping):
        return {str(k): normalize_metadata(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize_metadata(v) for v in value]
    return value
