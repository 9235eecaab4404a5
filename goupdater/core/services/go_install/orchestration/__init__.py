"""
L5 Orchestration — the install run end to end.
"""

from goupdater.core.services.go_install.orchestration.orchestrator import (  # noqa: F401
    InstallOptions,
    InstallResult,
    build_plan,
    run_install,
)
