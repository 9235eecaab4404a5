"""
L3 Detection — Installed Go version.

Read-only probe: runs ``go version`` and parses the output. The managed
binary under ``/usr/local/go`` is authoritative; whatever ``go`` is on
PATH is only consulted when the managed one is absent or unusable.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from goupdater.core.services.go_install.data.constants import GO_BINARY
from goupdater.core.services.go_install.domain.errors import (
    VersionNotFoundError,
    VersionParseError,
)
from goupdater.core.services.go_install.domain.version import parse_version_output

logger = logging.getLogger(__name__)


def probe_binary(path: str) -> str | None:
    """Return the version token reported by ``<path> version``, or None."""
    try:
        result = subprocess.run(
            [path, "version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as e:
        logger.debug("Cannot run %s: %s", path, e)
        return None

    if result.returncode != 0:
        logger.debug("%s version exited %d", path, result.returncode)
        return None

    try:
        return parse_version_output(result.stdout or "")
    except VersionParseError as e:
        logger.debug("%s", e)
        return None


def detect_installed_version(managed_binary: str = GO_BINARY) -> str:
    """Determine the currently installed Go version.

    Returns:
        Version token such as ``"go1.22.6"``.

    Raises:
        VersionNotFoundError: Neither the managed binary nor a ``go``
            on PATH produced parseable output.
    """
    if os.path.isfile(managed_binary):
        version = probe_binary(managed_binary)
        if version:
            return version

    fallback = shutil.which("go")
    if fallback:
        version = probe_binary(fallback)
        if version:
            return version

    raise VersionNotFoundError("no installed Go found")
