"""
L4 Execution — ``__init__.py`` re-exports all execution functions.

These functions WRITE to the system: subprocess calls, profile edits,
downloads.
"""

from goupdater.core.services.go_install.execution.config import (  # noqa: F401
    contains_profile_line,
    ensure_profile_line,
    path_export_line,
    user_profile_candidates,
)
from goupdater.core.services.go_install.execution.download import (  # noqa: F401
    download_file,
    fetch_latest_version,
)
from goupdater.core.services.go_install.execution.subprocess_runner import (  # noqa: F401
    run_as_root,
    run_command,
)
from goupdater.core.services.go_install.execution.system_path import (  # noqa: F401
    ensure_system_path,
)
