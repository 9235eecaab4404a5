"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from goupdater.core.context import ExecutionContext


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Return an empty fake home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def linux_ctx(home: Path) -> ExecutionContext:
    """Unprivileged linux/amd64 context with sudo available."""
    return ExecutionContext(
        goos="linux", goarch="x86_64", is_root=False,
        sudo_path="/usr/bin/sudo", home=home,
    )


@pytest.fixture
def darwin_ctx(home: Path) -> ExecutionContext:
    """Unprivileged darwin/arm64 context with sudo available."""
    return ExecutionContext(
        goos="darwin", goarch="arm64", is_root=False,
        sudo_path="/usr/bin/sudo", home=home,
    )
