"""
L4 Execution — System-wide PATH entry.

Content is staged in an unprivileged temp file and only the placement
runs as root. Each OS has two strategies:

    linux   install → /etc/profile.d/golang-path.sh   fallback: append /etc/profile
    darwin  install → /etc/paths.d/go                 fallback: append /etc/zprofile

The staging file is removed however the call ends.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Callable

from goupdater.core.context import ExecutionContext
from goupdater.core.services.go_install.data.constants import GO_BIN_DIR
from goupdater.core.services.go_install.data.profile_maps import _SYSTEM_PATH_MAP
from goupdater.core.services.go_install.domain.errors import SystemPathError, UpdaterError
from goupdater.core.services.go_install.execution.config import (
    path_export_line,
    shell_quote_single,
)
from goupdater.core.services.go_install.execution.subprocess_runner import run_as_root

logger = logging.getLogger(__name__)

Runner = Callable[..., None]


def system_path_content(goos: str) -> tuple[str, str]:
    """Return ``(primary_content, fallback_content)`` for ``goos``."""
    export = path_export_line(GO_BIN_DIR) + "\n"
    if goos == "darwin":
        # paths.d entries are bare directories, one per line.
        return f"{GO_BIN_DIR}\n", export

    primary = _SYSTEM_PATH_MAP["linux"]["primary"]
    script = f"# {primary}\n# Added by go-updater\n{export}"
    return script, script


def ensure_system_path(ctx: ExecutionContext, runner: Runner = run_as_root) -> str:
    """Add the Go bin directory to the system-wide PATH.

    Returns:
        The system file that now carries the entry.

    Raises:
        SystemPathError: Both strategies failed.
        OSError: The staging file could not be written.
    """
    targets = _SYSTEM_PATH_MAP.get(ctx.goos, _SYSTEM_PATH_MAP["linux"])
    primary_content, fallback_content = system_path_content(ctx.goos)

    fd, tmp_path = tempfile.mkstemp(prefix="golang-path-", suffix=targets["staging_suffix"])
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(primary_content)

        try:
            runner(ctx, "install", "-m", "0644", tmp_path, targets["primary"])
            logger.debug("Added system PATH at %s", targets["primary"])
            return targets["primary"]
        except UpdaterError as e:
            logger.info("Installing %s failed (%s), trying %s", targets["primary"], e, targets["fallback"])

        cmd = f"printf '{shell_quote_single(fallback_content)}' >> {targets['fallback']}"
        try:
            runner(ctx, "sh", "-c", cmd)
        except UpdaterError as e:
            raise SystemPathError(
                f"failed to update {targets['primary']} or {targets['fallback']}: {e}"
            ) from e
        logger.debug("Appended system PATH to %s", targets["fallback"])
        return targets["fallback"]
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
