from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An isolated installation environment and file registry per test.
3. Factories for host log records with fixed, local-noon timestamps.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rotating_log_writer.domain.records import LogRecord  # noqa: E402
from rotating_log_writer.infra.environment import Environment  # noqa: E402
from rotating_log_writer.infra.logging.registry import LogFileRegistry  # noqa: E402


def local_noon(year: int, month: int, day: int) -> float:
    """POSIX timestamp of local noon, far from any date boundary."""
    return datetime(year, month, day, 12, 0, 0).timestamp()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def environment(tmp_path: Path) -> Environment:
    """
    Provide an installation rooted in a temporary directory.

    Returns:
        Environment: project at <tmp>/project, var root at <tmp>/project/var.
    """
    project = tmp_path / "project"
    project.mkdir()
    return Environment(
        project_path=str(project),
        var_path=str(project / "var"),
        encryption_key="test-encryption-key",
    )


@pytest.fixture
def registry() -> Generator[LogFileRegistry, None, None]:
    """Provide an isolated registry and close whatever a test leaves open."""
    reg = LogFileRegistry()
    yield reg
    reg.close_all()


@pytest.fixture
def make_record() -> Callable[..., LogRecord]:
    """
    Factory for host log records.

    Defaults to an ERROR record dated 2026-10-19 with empty metadata.
    """
    def _make(**overrides: Any) -> LogRecord:
        values: dict = {
            "level": "error",
            "message": "boom",
            "component": "c1",
            "request_id": "r1",
            "data": {},
            "created": local_noon(2026, 10, 19),
        }
        values.update(overrides)
        return LogRecord(**values)

    return _make
