"""
L4 Execution — Core subprocess runner.

The SINGLE PLACE where privileged commands are launched. Each call
decides on its own, from the ``ExecutionContext`` it is given, whether
to run directly or through sudo. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
import subprocess

from goupdater.core.context import ExecutionContext
from goupdater.core.services.go_install.domain.errors import ExecError, PrivilegeError

logger = logging.getLogger(__name__)


def run_as_root(ctx: ExecutionContext, cmd: str, *args: str) -> None:
    """Run ``cmd args...`` with root privileges.

    Already root: the command runs directly with stdout/stderr going to
    the console. Otherwise sudo must be on PATH; its credential cache is
    refreshed first (``sudo -v``, failure ignored) and the command runs
    as ``sudo cmd args...`` with stdin attached so password prompts work.

    Raises:
        PrivilegeError: Not root and sudo is unavailable.
        ExecError: The command exited non-zero.
    """
    argv = [cmd, *args]

    if ctx.is_root:
        logger.debug("Running as root: %s", argv)
        _check(subprocess.run(argv), argv)
        return

    if not ctx.sudo_path:
        raise PrivilegeError("this action requires root; please re-run with sudo")

    refresh = subprocess.run([ctx.sudo_path, "-v"])
    if refresh.returncode != 0:
        logger.debug("sudo -v exited %d, continuing", refresh.returncode)

    full = [ctx.sudo_path, *argv]
    logger.debug("Running via sudo: %s", full)
    _check(subprocess.run(full), full)


def run_command(cmd: list[str]) -> str:
    """Run an unprivileged command and return combined stdout+stderr.

    Raises:
        ExecError: Non-zero exit (output attached to the error).
        OSError: The executable could not be started.
    """
    result = subprocess.run(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    if result.returncode != 0:
        raise ExecError(cmd, result.returncode, result.stdout or "")
    return result.stdout or ""


def _check(result: subprocess.CompletedProcess, argv: list[str]) -> None:
    if result.returncode != 0:
        raise ExecError(argv, result.returncode)
