"""
Go toolchain install service — package re-exports.

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → detection → execution →
orchestration)::

    from goupdater.core.services.go_install import run_install, normalize_version
"""

# ── L1: Domain ──
from goupdater.core.services.go_install.domain.errors import (  # noqa: F401
    ExecError,
    NetworkError,
    PrivilegeError,
    SystemPathError,
    UnsupportedPlatformError,
    UpdaterError,
    VersionNotFoundError,
    VersionParseError,
)
from goupdater.core.services.go_install.domain.platform import resolve_target  # noqa: F401
from goupdater.core.services.go_install.domain.version import (  # noqa: F401
    normalize_version,
    parse_version_output,
)

# ── L3: Detection ──
from goupdater.core.services.go_install.detection.installed_version import (  # noqa: F401
    detect_installed_version,
)

# ── L4: Execution ──
from goupdater.core.services.go_install.execution.config import (  # noqa: F401
    contains_profile_line,
    ensure_profile_line,
)
from goupdater.core.services.go_install.execution.download import (  # noqa: F401
    fetch_latest_version,
)
from goupdater.core.services.go_install.execution.subprocess_runner import (  # noqa: F401
    run_as_root,
)
from goupdater.core.services.go_install.execution.system_path import (  # noqa: F401
    ensure_system_path,
)

# ── L5: Orchestration ──
from goupdater.core.services.go_install.orchestration.orchestrator import (  # noqa: F401
    InstallOptions,
    InstallResult,
    run_install,
)
