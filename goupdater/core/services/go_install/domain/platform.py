"""
L1 Domain — Target platform resolution and archive naming.
"""

from __future__ import annotations

from goupdater.core.services.go_install.data.constants import (
    ARCH_ALIASES,
    SUPPORTED_ARCH,
    SUPPORTED_OS,
)
from goupdater.core.services.go_install.domain.errors import UnsupportedPlatformError


def resolve_target(goos: str, goarch: str) -> tuple[str, str]:
    """Validate an OS/arch pair against the allow-list.

    ``x86_64`` and ``aarch64`` are accepted as aliases for ``amd64``
    and ``arm64``.

    Returns:
        ``(goos, goarch)`` in Go download naming.

    Raises:
        UnsupportedPlatformError: OS or architecture not supported.
    """
    if goos not in SUPPORTED_OS:
        raise UnsupportedPlatformError(
            f"unsupported OS: {goos} (only {'/'.join(SUPPORTED_OS)} supported by this installer)"
        )

    goarch = ARCH_ALIASES.get(goarch, goarch)
    if goarch not in SUPPORTED_ARCH:
        raise UnsupportedPlatformError(f"unsupported arch: {goarch}")

    return goos, goarch


def archive_name(version: str, goos: str, goarch: str) -> str:
    """``go1.25.1.linux-amd64.tar.gz``"""
    return f"{version}.{goos}-{goarch}.tar.gz"


def archive_url(host: str, version: str, goos: str, goarch: str) -> str:
    return f"https://{host}/dl/{archive_name(version, goos, goarch)}"
