"""
L4 Execution — Release metadata and archive download.

Plain ``urllib.request``; one attempt per call, no retries.
"""

from __future__ import annotations

import http.client
import logging
import os
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from goupdater import __version__
from goupdater.core.services.go_install.data.constants import (
    DEFAULT_DOWNLOAD_HOST,
    LATEST_VERSION_PATH,
    LATEST_VERSION_READ_LIMIT,
    METADATA_TIMEOUT,
    VERSION_PREFIX,
)
from goupdater.core.services.go_install.domain.errors import NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = f"go-updater/{__version__}"

_CHUNK_SIZE = 64 * 1024


def fetch_latest_version(
    host: str = DEFAULT_DOWNLOAD_HOST,
    *,
    timeout: int = METADATA_TIMEOUT,
) -> str:
    """Fetch the latest release token (e.g. ``"go1.25.1"``).

    Only the first line of the response is used; the endpoint may
    append build metadata on following lines.

    Raises:
        NetworkError: Transport failure, non-200 status or a first line
            that is not a version token.
    """
    url = f"https://{host}{LATEST_VERSION_PATH}"
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            if resp.status != 200:
                raise NetworkError(f"unexpected status {resp.status} from {url}")
            body = resp.read(LATEST_VERSION_READ_LIMIT)
    except urllib.error.HTTPError as e:
        raise NetworkError(f"unexpected status {e.code} from {url}") from e
    except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
        raise NetworkError(f"failed to fetch {url}: {e}") from e

    lines = body.decode("utf-8", errors="replace").splitlines()
    version = lines[0].strip() if lines else ""
    if not version or not version.startswith(VERSION_PREFIX):
        raise NetworkError(f"invalid version string: {version!r}")

    logger.debug("Latest version from %s: %s", url, version)
    return version


def download_file(url: str, dest: Path) -> Path:
    """Stream ``url`` into ``dest``. No timeout: archives are large.

    Data is written to ``<dest>.part`` and renamed on completion, so an
    interrupted transfer never leaves a file at ``dest``.

    Raises:
        NetworkError: Transport failure, truncated body or non-200 status.
        OSError: ``dest`` could not be written.
    """
    part = dest.with_name(dest.name + ".part")
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        try:
            with urllib.request.urlopen(req) as resp:
                if resp.status != 200:
                    raise NetworkError(f"download failed: {url} -> HTTP {resp.status}")
                with open(part, "wb") as f:
                    shutil.copyfileobj(resp, f, _CHUNK_SIZE)
        except urllib.error.HTTPError as e:
            raise NetworkError(f"download failed: {url} -> HTTP {e.code}") from e
        except urllib.error.URLError as e:
            raise NetworkError(f"download failed: {url}: {e.reason}") from e
        except (ConnectionError, http.client.HTTPException) as e:
            raise NetworkError(f"download interrupted: {url}: {e}") from e
    except BaseException:
        _discard(part)
        raise

    os.replace(part, dest)
    logger.debug("Downloaded %s -> %s", url, dest)
    return dest


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
