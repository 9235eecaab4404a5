"""
L1 Domain — Error kinds raised by the installer.

Hard errors abort the run; ``SystemPathError`` is downgraded to a
warning by the orchestrator. Filesystem failures are plain ``OSError``.
"""

from __future__ import annotations


class UpdaterError(Exception):
    """Base class for every go-updater failure.

    ``step`` names the orchestration step that failed, when known; the
    CLI uses it to label the error line.
    """

    step: str = ""


class NetworkError(UpdaterError):
    """Metadata or archive fetch failed (transport error or non-200)."""


class UnsupportedPlatformError(UpdaterError):
    """OS/architecture pair outside the allow-list."""


class PrivilegeError(UpdaterError):
    """Root is required and no escalation helper is available."""


class ExecError(UpdaterError):
    """A subprocess exited non-zero."""

    def __init__(self, cmd: list[str], returncode: int, output: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.output = output
        super().__init__(f"command {' '.join(cmd)!r} exited with status {returncode}")


class VersionParseError(UpdaterError):
    """``go version`` output did not contain a version token."""


class VersionNotFoundError(UpdaterError):
    """No usable ``go`` binary produced a parseable version."""


class SystemPathError(UpdaterError):
    """Neither system-wide PATH strategy succeeded."""
