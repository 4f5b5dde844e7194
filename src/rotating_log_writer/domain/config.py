from __future__ import annotations

"""
Writer Configuration Model.

Defines the immutable configuration of the rotating file writer and the
parser that turns a host option mapping into it. Option keys are
accepted in the host's camelCase spelling (including the legacy names
used by older writer configurations) and in snake_case.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from rotating_log_writer.domain.constants import (
    DEFAULT_MAX_RETAINED_FILES,
    DEFAULT_SUPPRESS_EMPTY_METADATA,
    DEFAULT_USE_DATE_SUBFOLDER,
    ERR_INVALID_OPTION_VALUE,
    ERR_UNKNOWN_OPTION,
)
from rotating_log_writer.domain.errors import InvalidLogWriterConfigurationError

logger = logging.getLogger(__name__)

# Host option key -> dataclass field
_OPTION_ALIASES: Dict[str, str] = {
    "logFilePath": "log_file_path",
    "logFile": "log_file_path",
    "logFileInfix": "log_file_infix",
    "maxRetainedFiles": "max_retained_files",
    "maxFiles": "max_retained_files",
    "useDateSubfolder": "use_date_subfolder",
    "folderDateFormat": "use_date_subfolder",
    "suppressEmptyMetadata": "suppress_empty_metadata",
    "ignoreEmptyContextAndExtra": "suppress_empty_metadata",
}


@dataclass(frozen=True)
class WriterConfig:
    """
    Immutable specification of a rotating file writer.

    Attributes:
        log_file_path: Target log file, absolute or relative to the project
            path. None derives the default file under the var path.
        log_file_infix: Prefix for the derived default filename token.
        max_retained_files: Sealed dated files kept besides the active one.
            Zero disables pruning.
        use_date_subfolder: Nest dated files under YYYY/MM/.
        suppress_empty_metadata: Omit the metadata block for empty data.
    """
    log_file_path: Optional[str] = None
    log_file_infix: str = ""
    max_retained_files: int = DEFAULT_MAX_RETAINED_FILES
    use_date_subfolder: bool = DEFAULT_USE_DATE_SUBFOLDER
    suppress_empty_metadata: bool = DEFAULT_SUPPRESS_EMPTY_METADATA

    def __post_init__(self) -> None:
        _validate(self)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "WriterConfig":
        """
        Build a configuration from a host option mapping.

        Args:
            options: Option mapping, e.g. {"logFile": "var/log/app.log", "maxFiles": 7}.

        Returns:
            WriterConfig: Validated configuration.

        Raises:
            InvalidLogWriterConfigurationError: On unknown keys or bad values.
        """
        field_names = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key if key in field_names else None)
            if name is None:
                raise InvalidLogWriterConfigurationError(
                    f'Invalid LogWriter configuration option "{key}" '
                    f'for log writer of type "{cls.__name__}"',
                    ERR_UNKNOWN_OPTION,
                )
            values[name] = value

        # An empty path in the options means "use the default file"
        if values.get("log_file_path") == "":
            values["log_file_path"] = None

        config = cls(**values)
        logger.debug(f"WriterConfig parsed from options: {config}")
        return config


def _validate(config: WriterConfig) -> None:
    """Reject option values of the wrong type or range."""
    if config.log_file_path is not None and not isinstance(config.log_file_path, str):
        _invalid("log_file_path", config.log_file_path)
    if not isinstance(config.log_file_infix, str):
        _invalid("log_file_infix", config.log_file_infix)

    max_files = config.max_retained_files
    if isinstance(max_files, bool) or not isinstance(max_files, int) or max_files < 0:
        _invalid("max_retained_files", max_files)

    for name in ("use_date_subfolder", "suppress_empty_metadata"):
        if not isinstance(getattr(config, name), bool):
            _invalid(name, getattr(config, name))


def _invalid(name: str, value: Any) -> None:
    raise InvalidLogWriterConfigurationError(
        f'Invalid value {value!r} for LogWriter option "{name}"',
        ERR_INVALID_OPTION_VALUE,
    )
