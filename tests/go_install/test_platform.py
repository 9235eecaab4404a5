"""
Tests for target platform resolution and archive naming.
"""

from __future__ import annotations

import pytest

from goupdater.core.services.go_install.domain.errors import UnsupportedPlatformError
from goupdater.core.services.go_install.domain.platform import (
    archive_name,
    archive_url,
    resolve_target,
)


class TestResolveTarget:

    @pytest.mark.parametrize("goos, goarch, expected", [
        ("linux", "amd64", ("linux", "amd64")),
        ("linux", "arm64", ("linux", "arm64")),
        ("linux", "386", ("linux", "386")),
        ("linux", "x86_64", ("linux", "amd64")),
        ("linux", "aarch64", ("linux", "arm64")),
        ("darwin", "arm64", ("darwin", "arm64")),
        ("darwin", "x86_64", ("darwin", "amd64")),
    ])
    def test_supported(self, goos, goarch, expected):
        assert resolve_target(goos, goarch) == expected

    @pytest.mark.parametrize("goos", ["windows", "freebsd", "", "Linux"])
    def test_unsupported_os(self, goos):
        with pytest.raises(UnsupportedPlatformError, match="unsupported OS"):
            resolve_target(goos, "amd64")

    @pytest.mark.parametrize("goarch", ["riscv64", "armv7l", "ppc64le", "i686"])
    def test_unsupported_arch(self, goarch):
        with pytest.raises(UnsupportedPlatformError, match="unsupported arch"):
            resolve_target("linux", goarch)


class TestArchiveNaming:

    def test_archive_name(self):
        assert archive_name("go1.25.1", "linux", "amd64") == "go1.25.1.linux-amd64.tar.gz"

    def test_archive_url(self):
        assert (
            archive_url("go.dev", "go1.24beta1", "darwin", "arm64")
            == "https://go.dev/dl/go1.24beta1.darwin-arm64.tar.gz"
        )
