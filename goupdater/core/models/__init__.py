"""
Domain models for go-updater.
"""

from goupdater.core.models.config import UpdaterConfig  # noqa: F401
