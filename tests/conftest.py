"""Pytest configuration and shared fixtures for DWG version tool tests."""

import builtins
import struct
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from dwg_version.core.lookup import VersionLookup


def build_header(version: bytes, size: int = 108) -> bytes:
    """Build a minimal DWG header starting with ``version``."""
    header = bytearray(size)

    # Version string at 0x00 (6 bytes)
    header[0:len(version)] = version

    # Maintenance version at 0x0B, codepage at 0x13
    if size > 0x14:
        header[0x0B] = 0x03
        struct.pack_into("<H", header, 0x13, 0x001E)

    return bytes(header)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_dwg(temp_dir):
    """Factory writing a DWG-like file into temp_dir."""
    def _make(name: str, version: bytes = b"AC1032", content: bytes = None) -> Path:
        file_path = temp_dir / name
        file_path.write_bytes(build_header(version) if content is None else content)
        return file_path

    return _make


@pytest.fixture
def sample_lookup():
    """Lookup table with two signatures sharing a label."""
    return VersionLookup({
        "AC1032": "2018",
        "AC1033": "2018",
        "AC1035": "2021",
    })


@pytest.fixture
def dwg_folder(temp_dir, make_dwg):
    """Folder with three drawings, two of them written by the same release."""
    make_dwg("a.DWG", b"AC1032")
    make_dwg("b.DWG", b"AC1033")
    make_dwg("c.DWG", b"AC1035")
    return temp_dir


@pytest.fixture
def deny_read():
    """Make opening selected file names raise PermissionError."""
    real_open = builtins.open

    def _deny(*names: str):
        def fake_open(file, *args, **kwargs):
            if Path(file).name in names:
                raise PermissionError(13, "Permission denied", str(file))
            return real_open(file, *args, **kwargs)

        return patch("dwg_version.parsers.signature.open", side_effect=fake_open, create=True)

    return _deny
