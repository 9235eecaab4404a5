"""
Tests for release metadata and archive download (mocked urlopen).
"""

from __future__ import annotations

import http.client
import io
import urllib.error
from pathlib import Path
from unittest.mock import patch

import pytest

from goupdater.core.services.go_install.domain.errors import NetworkError
from goupdater.core.services.go_install.execution.download import (
    USER_AGENT,
    download_file,
    fetch_latest_version,
)

_URLOPEN = "goupdater.core.services.go_install.execution.download.urllib.request.urlopen"


class _FakeResponse(io.BytesIO):
    def __init__(self, data: bytes, status: int = 200) -> None:
        super().__init__(data)
        self.status = status


def _http_error(code: int) -> urllib.error.HTTPError:
    return urllib.error.HTTPError("https://go.dev/x", code, "error", hdrs=None, fp=None)


class TestFetchLatestVersion:

    def test_first_line(self):
        body = b"go1.25.1\ntime 2025-08-27T15:49:40Z\n"
        with patch(_URLOPEN, return_value=_FakeResponse(body)) as urlopen:
            assert fetch_latest_version() == "go1.25.1"
        req = urlopen.call_args.args[0]
        assert req.full_url == "https://go.dev/VERSION?m=text"
        assert req.get_header("User-agent") == USER_AGENT
        assert urlopen.call_args.kwargs["timeout"] == 15

    def test_custom_host_and_timeout(self):
        with patch(_URLOPEN, return_value=_FakeResponse(b"go1.24.0")) as urlopen:
            assert fetch_latest_version("golang.google.cn", timeout=3) == "go1.24.0"
        assert urlopen.call_args.args[0].full_url == "https://golang.google.cn/VERSION?m=text"
        assert urlopen.call_args.kwargs["timeout"] == 3

    @pytest.mark.parametrize("body", [b"", b"\n", b"<html>oops</html>", b"1.25.1\n"])
    def test_invalid_body(self, body: bytes):
        with patch(_URLOPEN, return_value=_FakeResponse(body)):
            with pytest.raises(NetworkError, match="invalid version string"):
                fetch_latest_version()

    def test_http_error(self):
        with patch(_URLOPEN, side_effect=_http_error(503)):
            with pytest.raises(NetworkError, match="unexpected status 503"):
                fetch_latest_version()

    def test_transport_error(self):
        with patch(_URLOPEN, side_effect=urllib.error.URLError("no route")):
            with pytest.raises(NetworkError):
                fetch_latest_version()

    def test_non_200_success_status(self):
        with patch(_URLOPEN, return_value=_FakeResponse(b"go1.25.1", status=203)):
            with pytest.raises(NetworkError, match="203"):
                fetch_latest_version()

    def test_truncated_body(self):
        class _Truncated(_FakeResponse):
            def read(self, *args):
                raise http.client.IncompleteRead(b"go1", 5)

        with patch(_URLOPEN, return_value=_Truncated(b"")):
            with pytest.raises(NetworkError, match="failed to fetch"):
                fetch_latest_version()


class TestDownloadFile:

    def test_writes_archive(self, tmp_path: Path):
        dest = tmp_path / "go1.25.1.linux-amd64.tar.gz"
        payload = b"\x1f\x8b" + b"x" * 200_000
        with patch(_URLOPEN, return_value=_FakeResponse(payload)) as urlopen:
            assert download_file("https://go.dev/dl/a.tar.gz", dest) == dest
        assert dest.read_bytes() == payload
        assert not (tmp_path / (dest.name + ".part")).exists()
        assert "timeout" not in urlopen.call_args.kwargs

    def test_404_leaves_nothing(self, tmp_path: Path):
        dest = tmp_path / "go0.0.linux-amd64.tar.gz"
        with patch(_URLOPEN, side_effect=_http_error(404)):
            with pytest.raises(NetworkError, match="HTTP 404"):
                download_file("https://go.dev/dl/go0.0.linux-amd64.tar.gz", dest)
        assert list(tmp_path.iterdir()) == []

    def test_interrupted_transfer_leaves_nothing(self, tmp_path: Path):
        class _Broken(_FakeResponse):
            def read(self, *args):
                raise ConnectionResetError("reset by peer")

        dest = tmp_path / "go.tar.gz"
        with patch(_URLOPEN, return_value=_Broken(b"")):
            with pytest.raises(NetworkError, match="interrupted"):
                download_file("https://go.dev/dl/go.tar.gz", dest)
        assert list(tmp_path.iterdir()) == []

    def test_truncated_body_leaves_nothing(self, tmp_path: Path):
        class _Truncated(_FakeResponse):
            def read(self, *args):
                raise http.client.IncompleteRead(b"abc", 100)

        dest = tmp_path / "go.tar.gz"
        with patch(_URLOPEN, return_value=_Truncated(b"")):
            with pytest.raises(NetworkError, match="interrupted"):
                download_file("https://go.dev/dl/go.tar.gz", dest)
        assert list(tmp_path.iterdir()) == []
