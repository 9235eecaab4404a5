"""
L0 Data — Module-level constants.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# ── Endpoints ───────────────────────────────────────────────────

DEFAULT_DOWNLOAD_HOST = "go.dev"

# Plain-text endpoint; the first line is the latest release token.
LATEST_VERSION_PATH = "/VERSION?m=text"

# Upper bound on bytes read from the metadata endpoint.
LATEST_VERSION_READ_LIMIT = 1024

METADATA_TIMEOUT = 15

# ── Filesystem layout ──────────────────────────────────────────

INSTALL_PARENT = "/usr/local"
INSTALL_ROOT = "/usr/local/go"
GO_BIN_DIR = "/usr/local/go/bin"
GO_BINARY = "/usr/local/go/bin/go"

# ── Version tokens ─────────────────────────────────────────────

VERSION_PREFIX = "go"

# ── Platform allow-list ────────────────────────────────────────

SUPPORTED_OS: tuple[str, ...] = ("linux", "darwin")
SUPPORTED_ARCH: tuple[str, ...] = ("amd64", "arm64", "386")

# uname -m style names → Go download naming.
ARCH_ALIASES: dict[str, str] = {
    "x86_64": "amd64",
    "aarch64": "arm64",
}

# ── Shell profile content ──────────────────────────────────────

PROFILE_LINE = f"export PATH=$PATH:{GO_BIN_DIR}"
PROFILE_COMMENT = "# Added by go-updater to expose Go binaries"

# Loose-match keyword: a line mentioning GO_BIN_DIR together with this
# keyword counts as an existing PATH export.
PATH_EXPORT_KEYWORD = "export PATH"
