"""
Updater configuration model — the optional ``config.yml``.

Every field has a default, so an empty or missing file is valid.
CLI flags override whatever is set here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UpdaterConfig(BaseModel):
    """Defaults for ``go-updater install``."""

    model_config = ConfigDict(extra="forbid")

    download_host: str = "go.dev"
    download_dir: str | None = None     # None = system temp dir
    system_path: bool = False
    no_path_update: bool = False
    metadata_timeout: int = Field(default=15, gt=0)
