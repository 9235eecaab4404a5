"""
L3 Detection — read-only probes of the installed toolchain.
"""

from goupdater.core.services.go_install.detection.installed_version import (  # noqa: F401
    detect_installed_version,
    probe_binary,
)
