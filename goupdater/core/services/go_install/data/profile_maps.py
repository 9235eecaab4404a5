"""
L0 Data — Shell profile and system PATH file mappings.

Maps an OS family to the user profile files (in priority order) and to
the system-wide PATH locations.
"""

from __future__ import annotations

# First existing file wins; the first entry is created when none exist.
_USER_PROFILE_MAP: dict[str, tuple[str, ...]] = {
    "darwin": (".zprofile", ".zshrc", ".bash_profile", ".profile"),
    "linux": (".profile",),
}

_SOURCE_HINT_MAP: dict[str, str] = {
    "darwin": "~/.zprofile",
    "linux": "~/.profile",
}

# primary: drop-in file installed with ``install -m 0644``.
# fallback: global profile appended to with ``printf >>``.
_SYSTEM_PATH_MAP: dict[str, dict[str, str]] = {
    "linux": {
        "primary": "/etc/profile.d/golang-path.sh",
        "fallback": "/etc/profile",
        "staging_suffix": ".sh",
    },
    "darwin": {
        "primary": "/etc/paths.d/go",
        "fallback": "/etc/zprofile",
        "staging_suffix": ".txt",
    },
}
