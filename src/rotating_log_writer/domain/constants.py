from __future__ import annotations

"""
Domain Constants.

Centralizes the default log file template, configuration defaults, the
numeric severity scale used by the file channel and the documented error
codes raised by the writer.
"""

from typing import Dict

# -----------------------------------------------------------------------------
# DEFAULT LOG FILE
# -----------------------------------------------------------------------------
DEFAULT_LOG_FILE_TEMPLATE = "/log/monolog_%s.log"
DEFAULT_LOG_FILE_HMAC_SECRET = "defaultLogFile"
DEFAULT_LOG_FILE_TOKEN_LENGTH = 10

DEFAULT_MAX_RETAINED_FILES = 31
DEFAULT_USE_DATE_SUBFOLDER = True
DEFAULT_SUPPRESS_EMPTY_METADATA = True

CHANNEL_NAME = "LogRotateFileWriter"

# -----------------------------------------------------------------------------
# SEVERITY SCALE
# -----------------------------------------------------------------------------
# Keyed by level name, increasing with severity.
SEVERITY_SCALE: Dict[str, int] = {
    "EMERGENCY": 600,
    "ALERT": 550,
    "CRITICAL": 500,
    "ERROR": 400,
    "WARNING": 300,
    "NOTICE": 250,
    "INFO": 200,
    "DEBUG": 100,
}

# -----------------------------------------------------------------------------
# ERROR CODES
# -----------------------------------------------------------------------------
ERR_INVALID_LOG_PATH = 1444374805
ERR_ROTATION_CONFLICT = 1444374806
ERR_UNSUPPORTED_STREAM = 1444374807
ERR_PATH_LOCKED = 1444374808
ERR_UNKNOWN_OPTION = 1321696152
ERR_INVALID_OPTION_VALUE = 1321696153
ERR_INVALID_LEVEL = 1321637121
ERR_WRITE_FAILED = 1345036335
