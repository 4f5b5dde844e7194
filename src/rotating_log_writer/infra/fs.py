from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path predicates and resolution helpers used to turn a
configured log file value into an absolute filesystem path.
"""

import os
from typing import Optional

STREAM_SEPARATOR = "://"
FILE_SCHEME = "file://"

# -----------------------------------------------------------------------------
# PATH PREDICATES
# -----------------------------------------------------------------------------

def is_stream_reference(path: str) -> bool:
    """Return True for URI-like references such as 'file:///var/log/app.log'."""
    return STREAM_SEPARATOR in path


def is_absolute_path(path: str) -> bool:
    """Return True for absolute paths, including Windows drive paths on POSIX hosts."""
    if os.path.isabs(path):
        return True
    return len(path) > 2 and path[0].isalpha() and path[1] == ":" and path[2] in "\\/"


def is_valid_relative_path(path: str) -> bool:
    """
    Check that a relative path stays below its base directory.

    Rejects empty values, NUL bytes and any '..' segment.
    """
    if not path or "\x00" in path:
        return False
    parts = path.replace("\\", "/").split("/")
    return ".." not in parts

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_absolute_file_name(path: str, base_dir: str) -> str:
    """
    Resolve a relative path under a base directory.

    Args:
        path: Relative path, e.g. 'var/log/app.log'.
        base_dir: Absolute base directory.

    Returns:
        str: Normalized absolute path, or '' if the path is not usable.
    """
    p = (path or "").strip()
    if not is_valid_relative_path(p):
        return ""
    return os.path.normpath(os.path.join(base_dir, p.lstrip("/\\")))


def resolve_log_file_path(path: str, base_dir: str) -> str:
    """
    Resolve a configured log file value.

    Stream references and absolute paths are returned unchanged; anything
    else is resolved relative to base_dir.

    Returns:
        str: Resolved path, or '' if it cannot be resolved.
    """
    if not path:
        return ""
    if is_stream_reference(path) or is_absolute_path(path):
        return path
    return get_absolute_file_name(path, base_dir)


def stream_to_local_path(path: str) -> Optional[str]:
    """
    Map a resolved log file value onto a local filesystem path.

    Returns:
        Optional[str]: Local path, or None for streams that are not files.
    """
    if path.startswith(FILE_SCHEME):
        return path[len(FILE_SCHEME):] or None
    if is_stream_reference(path):
        return None
    return path


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Args:
        path: Absolute path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)


def remove_empty_dirs(path: str, stop_at: str) -> None:
    """
    Remove path and its empty parents, never touching stop_at or above.

    Args:
        path: Innermost directory to consider.
        stop_at: Directory that bounds the cleanup.
    """
    stop_at = os.path.abspath(stop_at)
    current = os.path.abspath(path)
    while current != stop_at and current.startswith(stop_at + os.sep):
        try:
            os.rmdir(current)
        except OSError:
            # Not empty (or already gone); parents are not empty either
            return
        current = os.path.dirname(current)
