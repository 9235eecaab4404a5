"""
Tests for installed Go version detection (mocked subprocess).
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from goupdater.core.services.go_install.detection.installed_version import (
    detect_installed_version,
    probe_binary,
)
from goupdater.core.services.go_install.domain.errors import VersionNotFoundError

_MOD = "goupdater.core.services.go_install.detection.installed_version"


def _completed(stdout: str = "", rc: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["go", "version"], returncode=rc, stdout=stdout)


@pytest.fixture
def managed(tmp_path: Path) -> Path:
    binary = tmp_path / "go"
    binary.write_text("#!/bin/sh\n")
    return binary


class TestProbeBinary:

    def test_parses_output(self):
        with patch(f"{_MOD}.subprocess.run",
                   return_value=_completed("go version go1.22.6 linux/amd64\n")):
            assert probe_binary("/usr/local/go/bin/go") == "go1.22.6"

    def test_nonzero_exit(self):
        with patch(f"{_MOD}.subprocess.run",
                   return_value=_completed("go version go1.22.6 linux/amd64", rc=2)):
            assert probe_binary("/usr/local/go/bin/go") is None

    def test_unparseable_output(self):
        with patch(f"{_MOD}.subprocess.run", return_value=_completed("segfault")):
            assert probe_binary("/usr/local/go/bin/go") is None

    def test_exec_failure(self):
        with patch(f"{_MOD}.subprocess.run", side_effect=PermissionError("denied")):
            assert probe_binary("/usr/local/go/bin/go") is None


class TestDetectInstalledVersion:

    def test_prefers_managed_binary(self, managed: Path):
        with patch(f"{_MOD}.subprocess.run",
                   return_value=_completed("go version go1.25.1 linux/amd64")) as run, \
             patch(f"{_MOD}.shutil.which") as which:
            assert detect_installed_version(str(managed)) == "go1.25.1"
        run.assert_called_once()
        assert run.call_args.args[0] == [str(managed), "version"]
        which.assert_not_called()

    def test_falls_back_to_path_when_managed_missing(self, tmp_path: Path):
        with patch(f"{_MOD}.shutil.which", return_value="/opt/go/bin/go"), \
             patch(f"{_MOD}.subprocess.run",
                   return_value=_completed("go version go1.21.0 darwin/arm64")) as run:
            assert detect_installed_version(str(tmp_path / "missing")) == "go1.21.0"
        assert run.call_args.args[0] == ["/opt/go/bin/go", "version"]

    def test_falls_back_when_managed_output_unparseable(self, managed: Path):
        outputs = [_completed("garbage"), _completed("go version go1.20.5 linux/amd64")]
        with patch(f"{_MOD}.shutil.which", return_value="/usr/bin/go"), \
             patch(f"{_MOD}.subprocess.run", side_effect=outputs):
            assert detect_installed_version(str(managed)) == "go1.20.5"

    def test_managed_directory_is_not_a_binary(self, tmp_path: Path):
        with patch(f"{_MOD}.shutil.which", return_value=None), \
             patch(f"{_MOD}.subprocess.run") as run:
            with pytest.raises(VersionNotFoundError):
                detect_installed_version(str(tmp_path))
        run.assert_not_called()

    def test_not_found_when_both_fail(self, managed: Path):
        with patch(f"{_MOD}.shutil.which", return_value="/usr/bin/go"), \
             patch(f"{_MOD}.subprocess.run", return_value=_completed("nope", rc=1)):
            with pytest.raises(VersionNotFoundError):
                detect_installed_version(str(managed))
