"""
L5 Orchestration — Install or upgrade Go.

Sequence:
    platform → target version → up-to-date check → download
    → replace /usr/local/go (root) → PATH updates → verify

Every step raises on failure except the system-wide PATH update and
the version-text comparison after install, which only add warnings.
"""

from __future__ import annotations

import logging
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

from goupdater.core.context import ExecutionContext
from goupdater.core.services.go_install.data.constants import (
    DEFAULT_DOWNLOAD_HOST,
    GO_BIN_DIR,
    GO_BINARY,
    INSTALL_PARENT,
    INSTALL_ROOT,
    METADATA_TIMEOUT,
    PROFILE_LINE,
)
from goupdater.core.services.go_install.data.profile_maps import (
    _SOURCE_HINT_MAP,
    _SYSTEM_PATH_MAP,
)
from goupdater.core.services.go_install.detection.installed_version import (
    detect_installed_version,
)
from goupdater.core.services.go_install.domain.errors import (
    UpdaterError,
    VersionNotFoundError,
)
from goupdater.core.services.go_install.domain.platform import (
    archive_name,
    archive_url,
    resolve_target,
)
from goupdater.core.services.go_install.domain.version import normalize_version
from goupdater.core.services.go_install.execution.config import (
    ensure_profile_line,
    user_profile_candidates,
)
from goupdater.core.services.go_install.execution.download import (
    download_file,
    fetch_latest_version,
)
from goupdater.core.services.go_install.execution.subprocess_runner import (
    run_as_root,
    run_command,
)
from goupdater.core.services.go_install.execution.system_path import ensure_system_path

logger = logging.getLogger(__name__)


@dataclass
class InstallOptions:
    """What the user asked for (CLI flags merged over the config file)."""

    version: str = ""
    dry_run: bool = False
    no_path_update: bool = False
    system_path: bool = False
    download_dir: Path | None = None
    download_host: str = DEFAULT_DOWNLOAD_HOST
    metadata_timeout: int = METADATA_TIMEOUT


@dataclass
class InstallResult:
    """Outcome of one run."""

    status: str = "installed"  # installed | up_to_date | planned
    version: str = ""
    goos: str = ""
    goarch: str = ""
    url: str = ""
    archive: Path | None = None
    archive_reused: bool = False
    profile_file: Path | None = None
    system_path_file: str | None = None
    verify_output: str = ""
    source_hint: str = ""
    plan: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "status": self.status,
            "version": self.version,
            "platform": f"{self.goos}/{self.goarch}" if self.goos else "",
            "url": self.url,
            "archive": str(self.archive) if self.archive else None,
            "archive_reused": self.archive_reused,
            "profile_file": str(self.profile_file) if self.profile_file else None,
            "system_path_file": self.system_path_file,
            "verify_output": self.verify_output,
            "plan": self.plan,
            "warnings": self.warnings,
        }


def build_plan(
    version: str,
    goos: str,
    url: str,
    archive: Path,
    *,
    no_path_update: bool,
    system_path: bool,
) -> list[str]:
    """Itemized list of what a run would do."""
    plan = [
        f"Determine version: {version}",
        f"Download {url} -> {archive}",
        f"Remove any previous {INSTALL_ROOT}",
        f"Extract archive into {INSTALL_PARENT}",
    ]
    if no_path_update:
        plan.append("Skip PATH update (per --no-path-update)")
    else:
        plan.append(f"Add '{GO_BIN_DIR}' to PATH in your shell profile (idempotent)")
        if system_path:
            drop_in = _SYSTEM_PATH_MAP.get(goos, _SYSTEM_PATH_MAP["linux"])["primary"]
            plan.append(
                f"Also add system-wide PATH via {str(Path(drop_in).parent)} (requires sudo)"
            )
    plan.append(f"Verify with '{GO_BINARY} version'")
    return plan


def run_install(
    options: InstallOptions,
    ctx: ExecutionContext,
    *,
    on_progress: Callable[[str], None] | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> InstallResult:
    """Install (or upgrade to) the requested Go version.

    Args:
        options: Requested version and toggles.
        ctx: Platform and privilege facts for this process.
        on_progress: Called with a one-line message at each milestone.
        on_warning: Called with each non-fatal problem (also kept in
            ``InstallResult.warnings``).

    Returns:
        ``InstallResult`` with ``status`` ``up_to_date``, ``planned``
        (dry run) or ``installed``.

    Raises:
        UnsupportedPlatformError, NetworkError, PrivilegeError,
        ExecError, OSError: A hard step failed.
    """

    def progress(msg: str) -> None:
        logger.info(msg)
        if on_progress:
            on_progress(msg)

    def warn(msg: str) -> None:
        logger.debug("warning: %s", msg)
        result.warnings.append(msg)
        if on_warning:
            on_warning(msg)

    with _step("resolve target platform"):
        goos, goarch = resolve_target(ctx.goos, ctx.goarch)

    if options.version.strip():
        version = normalize_version(options.version)
    else:
        with _step("fetch latest version"):
            version = fetch_latest_version(
                options.download_host, timeout=options.metadata_timeout,
            )

    result = InstallResult(version=version, goos=goos, goarch=goarch)

    try:
        installed = detect_installed_version()
    except VersionNotFoundError:
        installed = None
    if installed == version:
        progress(f"Go is already up to date ({version}). Nothing to do.")
        result.status = "up_to_date"
        return result

    name = archive_name(version, goos, goarch)
    result.url = archive_url(options.download_host, version, goos, goarch)
    dl_dir = options.download_dir or Path(tempfile.gettempdir())
    result.archive = dl_dir / name
    result.plan = build_plan(
        version, goos, result.url, result.archive,
        no_path_update=options.no_path_update,
        system_path=options.system_path,
    )

    progress(f"Target version: {version}")
    progress(f"Platform: {goos}/{goarch}")
    progress(f"Download: {result.url}\n       to: {result.archive}")

    if options.dry_run:
        result.status = "planned"
        return result

    with _step("create download dir"):
        dl_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    if result.archive.exists():
        result.archive_reused = True
        progress(f"Using existing archive: {result.archive}")
    else:
        with _step("download archive"):
            download_file(result.url, result.archive)
        progress(f"Downloaded: {result.archive}")

    with _step(f"remove previous {INSTALL_ROOT}"):
        run_as_root(ctx, "rm", "-rf", INSTALL_ROOT)
    with _step(f"extract archive to {INSTALL_PARENT}"):
        run_as_root(ctx, "tar", "-C", INSTALL_PARENT, "-xzf", str(result.archive))
    progress(f"Extracted to {INSTALL_ROOT}")

    if not options.no_path_update:
        candidates = user_profile_candidates(goos, ctx.home)
        with _step("ensure user PATH in shell profile"):
            result.profile_file = ensure_profile_line(candidates, PROFILE_LINE)
        if result.profile_file:
            progress(f"Added PATH update to {result.profile_file}")
        else:
            progress(f"User PATH already contains {GO_BIN_DIR}")

        if options.system_path:
            try:
                result.system_path_file = ensure_system_path(ctx)
                progress(f"Added system PATH at {result.system_path_file}")
            except (UpdaterError, OSError) as e:
                warn(f"system-wide PATH update failed: {e}")

    # Absolute path: independent of any PATH change made above.
    with _step(f"verify: running '{GO_BINARY} version'"):
        result.verify_output = run_command([GO_BINARY, "version"])
    if version not in result.verify_output:
        warn(
            f"Installed Go reported '{result.verify_output.strip()}' "
            f"which does not contain expected version '{version}'",
        )

    result.source_hint = _SOURCE_HINT_MAP.get(goos, "~/.profile")
    progress(f"Go {version} installed successfully.")
    return result


@contextmanager
def _step(label: str) -> Iterator[None]:
    """Tag errors escaping the block with the step they came from."""
    try:
        yield
    except (UpdaterError, OSError) as e:
        if not getattr(e, "step", ""):
            e.step = label
        raise
