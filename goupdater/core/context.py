"""
Execution context — the process facts a run depends on.

Built once by the CLI entry point with ``detect_execution_context()``
and passed explicitly to the orchestrator and to every privileged
call. Nothing downstream reads euid, ``sys.platform`` or ``$HOME``
directly, so tests construct a context by hand:

    ctx = ExecutionContext(goos="linux", goarch="amd64",
                           is_root=False, sudo_path=None, home=tmp_path)
"""

from __future__ import annotations

import os
import platform
import shutil
import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict

# sys.platform → Go OS naming. Unknown platforms pass through so that
# platform resolution can reject them with a proper error.
_GOOS_MAP = {"linux": "linux", "darwin": "darwin"}


class ExecutionContext(BaseModel):
    """Privilege level, escalation helper and platform of the current process."""

    model_config = ConfigDict(frozen=True)

    goos: str
    goarch: str
    is_root: bool = False
    sudo_path: str | None = None
    home: Path

    @property
    def can_escalate(self) -> bool:
        return self.is_root or self.sudo_path is not None


def detect_execution_context() -> ExecutionContext:
    """Probe the running process.

    Raises:
        OSError: The home directory cannot be resolved.
    """
    try:
        home = Path.home()
    except RuntimeError as e:
        raise OSError(f"cannot resolve home directory: {e}") from e

    goos = sys.platform
    for prefix, name in _GOOS_MAP.items():
        if goos.startswith(prefix):
            goos = name
            break

    return ExecutionContext(
        goos=goos,
        goarch=platform.machine().lower(),
        is_root=hasattr(os, "geteuid") and os.geteuid() == 0,
        sudo_path=shutil.which("sudo"),
        home=home,
    )
