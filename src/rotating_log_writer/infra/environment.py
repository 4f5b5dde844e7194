from __future__ import annotations

"""
Host Environment Layer.

Captures the ambient values the host installation supplies to the
writer: the project base directory, the variable-data root and the
installation secret used for keyed hashing.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

ENV_PROJECT_PATH = "LOGWRITER_PROJECT_PATH"
ENV_VAR_PATH = "LOGWRITER_VAR_PATH"
ENV_ENCRYPTION_KEY = "LOGWRITER_ENCRYPTION_KEY"
DEFAULT_VAR_SUBDIR = "var"


@dataclass(frozen=True)
class Environment:
    """
    Installation paths and secret.

    Attributes:
        project_path: Absolute base directory relative paths resolve against.
        var_path: Absolute variable-data root (default log files live below it).
        encryption_key: Installation secret mixed into the default filename.
    """
    project_path: str
    var_path: str
    encryption_key: str = ""

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        """
        Resolve the environment from process variables.

        Falls back to the current working directory as project path and
        '<project>/var' as variable-data root.

        Args:
            environ: Variable mapping; defaults to os.environ.

        Returns:
            Environment: Resolved, absolute environment.
        """
        env = os.environ if environ is None else environ

        project_path = (env.get(ENV_PROJECT_PATH) or "").strip() or os.getcwd()
        project_path = os.path.abspath(os.path.expanduser(project_path))

        var_path = (env.get(ENV_VAR_PATH) or "").strip()
        if var_path:
            var_path = os.path.abspath(os.path.expanduser(var_path))
        else:
            var_path = os.path.join(project_path, DEFAULT_VAR_SUBDIR)

        return cls(
            project_path=project_path,
            var_path=var_path,
            encryption_key=env.get(ENV_ENCRYPTION_KEY, ""),
        )
