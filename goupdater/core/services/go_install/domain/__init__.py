"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

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
from goupdater.core.services.go_install.domain.platform import (  # noqa: F401
    archive_name,
    archive_url,
    resolve_target,
)
from goupdater.core.services.go_install.domain.version import (  # noqa: F401
    normalize_version,
    parse_version_output,
)
