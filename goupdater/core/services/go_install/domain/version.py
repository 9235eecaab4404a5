"""
L1 Domain — Version token normalization and ``go version`` parsing.

A version token is ``go`` followed by ASCII digits, lowercase letters
and dots (``go1.25.1``, ``go1.24beta1``). Normalization is lenient:
noisy input is truncated rather than rejected.
"""

from __future__ import annotations

import string

from goupdater.core.services.go_install.data.constants import VERSION_PREFIX
from goupdater.core.services.go_install.domain.errors import VersionParseError

_ALLOWED = frozenset(string.digits + string.ascii_lowercase + ".")


def normalize_version(text: str) -> str:
    """Turn user input or command output into a version token.

    Only the first whitespace-separated field is kept, the ``go``
    prefix is added when missing, and everything from the first
    character outside ``[0-9a-z.]`` onwards is dropped::

        >>> normalize_version("1.25.1")
        'go1.25.1'
        >>> normalize_version("go1.25.1 time 2025-08-27T15:49:40Z")
        'go1.25.1'
        >>> normalize_version("go1.25.1!")
        'go1.25.1'

    Empty (or all-whitespace) input returns ``""``. Never raises.
    """
    text = text.strip()
    if not text:
        return text

    token = text.split()[0]
    if not token.startswith(VERSION_PREFIX):
        token = VERSION_PREFIX + token

    n = len(VERSION_PREFIX)
    end = n
    while end < len(token) and token[end] in _ALLOWED:
        end += 1
    return token[:end]


def parse_version_output(output: str) -> str:
    """Extract the version token from ``go version`` output.

    Typical input is ``"go version go1.22.6 linux/amd64"``. When the
    third field is not a token, the first field that normalizes to more
    than the bare prefix is used.

    Raises:
        VersionParseError: No field looks like a version token.
    """
    fields = output.strip().split()
    if len(fields) >= 3 and fields[2].startswith(VERSION_PREFIX):
        return normalize_version(fields[2])

    for field in fields:
        if not field.startswith(VERSION_PREFIX):
            continue
        token = normalize_version(field)
        if len(token) > len(VERSION_PREFIX):
            return token

    raise VersionParseError(f"unable to parse version from: {output!r}")
