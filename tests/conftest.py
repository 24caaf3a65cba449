"""
Pytest configuration and fixtures for Nerd Font installer tests.
"""

import io
import struct
import tempfile
import zipfile
from pathlib import Path

import pytest
import requests

from nerdfonts.core.config import InstallerConfig
from nerdfonts.fonts.catalog import get_catalog


def build_zip(members: dict[str, bytes | None]) -> bytes:
    """Build an in-memory zip archive. A value of None adds a directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in members.items():
            if data is None:
                zf.writestr(zipfile.ZipInfo(name.rstrip("/") + "/"), b"")
            else:
                zf.writestr(name, data)
    return buffer.getvalue()


def corrupt_member(archive: bytes, name: str) -> bytes:
    """Flip bytes inside the compressed data of one archive member."""
    with zipfile.ZipFile(io.BytesIO(archive)) as zf:
        info = zf.getinfo(name)
    data = bytearray(archive)
    header = info.header_offset
    name_len, extra_len = struct.unpack("<HH", data[header + 26 : header + 30])
    start = header + 30 + name_len + extra_len
    for offset in range(start + 2, start + info.compress_size - 2):
        data[offset] ^= 0x5A
    return bytes(data)


def make_response(url: str, status_code: int = 200, content: bytes = b"") -> requests.Response:
    """Create a fully read requests.Response."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = content
    response._content_consumed = True
    return response


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def catalog():
    """Full font catalog."""
    return get_catalog()


@pytest.fixture
def font_dir(temp_dir):
    """Font install directory (not created)."""
    return temp_dir / "fonts"


@pytest.fixture
def download_dir(temp_dir):
    """Directory for downloaded archives."""
    path = temp_dir / "downloads"
    path.mkdir()
    return path


@pytest.fixture
def installer_config(font_dir, download_dir):
    """Installer configuration writing only inside the temp directory."""
    return InstallerConfig(
        _env_file=None,
        release_base_url="https://releases.example.com/latest/download",
        temp_dir=download_dir,
        font_dir=font_dir,
        show_progress=False,
    )


@pytest.fixture
def sample_archive():
    """Archive with two fonts, a readme and a directory entry."""
    return build_zip(
        {
            "Foo.ttf": b"foo-font-data",
            "Bar.otf": b"bar-font-data",
            "readme.md": b"# readme",
            "docs/": None,
        }
    )
