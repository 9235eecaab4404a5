"""
L4 Execution — Shell profile configuration.

Generates PATH export lines and appends them to the user's shell
profile. Writes are IDEMPOTENT: a profile that already exports the Go
bin directory, in any phrasing, is left untouched.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from goupdater.core.services.go_install.data.constants import (
    GO_BIN_DIR,
    PATH_EXPORT_KEYWORD,
    PROFILE_COMMENT,
)
from goupdater.core.services.go_install.data.profile_maps import _USER_PROFILE_MAP

logger = logging.getLogger(__name__)


def user_profile_candidates(goos: str, home: Path) -> list[Path]:
    """Profile files for ``goos`` in priority order."""
    names = _USER_PROFILE_MAP.get(goos, _USER_PROFILE_MAP["linux"])
    return [home / name for name in names]


def contains_profile_line(content: str, target: str) -> bool:
    """Whether ``content`` already has ``target`` or an equivalent export.

    A line matches when, trimmed, it equals ``target``, or when it
    mentions both the Go bin directory and ``export PATH`` (covers
    ``export PATH=/usr/local/go/bin:$PATH`` and similar). The loose form
    also accepts an unrelated comment that happens to contain both.
    """
    for line in content.split("\n"):
        line = line.strip()
        if line == target:
            return True
        if GO_BIN_DIR in line and PATH_EXPORT_KEYWORD in line:
            return True
    return False


def ensure_profile_line(candidates: Iterable[Path], line: str) -> Path | None:
    """Make sure one of ``candidates`` exports ``line``.

    1. If any existing candidate already satisfies the line, do nothing.
    2. Otherwise append a comment + the line to the first existing file.
    3. If none exists, create the first candidate with that block.

    Returns:
        The file that was written, or None when nothing changed.

    Raises:
        OSError: Reading or writing a profile failed.
        ValueError: ``candidates`` is empty.
    """
    candidates = list(candidates)
    if not candidates:
        raise ValueError("no profile candidates given")

    for path in candidates:
        if not path.is_file():
            continue
        content = path.read_text(encoding="utf-8", errors="replace")
        if contains_profile_line(content, line):
            logger.debug("User PATH already contains %s in %s", GO_BIN_DIR, path)
            return None

    target = next((p for p in candidates if p.is_file()), candidates[0])
    _append_block(target, line)
    logger.debug("Added PATH update to %s", target)
    return target


def _append_block(path: Path, line: str) -> None:
    # O_APPEND keeps existing content; 0o644 only applies on creation.
    fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(f"\n{PROFILE_COMMENT}\n{line}\n")
        f.flush()


def path_export_line(path_entry: str) -> str:
    """POSIX-shell line appending ``path_entry`` to PATH (quoted)."""
    return f'export PATH="$PATH:{path_entry}"'


def shell_quote_single(text: str) -> str:
    """Escape ``text`` for use inside a single-quoted shell string."""
    return text.replace("'", "'\\''")
