"""
Shared fixtures for pybundle tests.

Archives are built on the fly; HTTP is replaced by patching the opener.
"""

import io
import tarfile
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest


class FakeResponse:
    """Minimal stand-in for the object urllib's opener returns."""

    def __init__(self, body: bytes = b"", status: int = 200, headers: Optional[Dict[str, str]] = None):
        self._buf = io.BytesIO(body)
        self.status = status
        self.headers = headers if headers is not None else {"Content-Length": str(len(body))}

    def read(self, size: int = -1) -> bytes:
        return self._buf.read(size)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def make_tar_gz(path: Path, files: Dict[str, bytes], top: str = "python") -> Path:
    """Write a gzip tarball with every file under a single top-level directory."""
    with tarfile.open(path, "w:gz") as tar:
        info = tarfile.TarInfo(top)
        info.type = tarfile.DIRTYPE
        info.mode = 0o755
        tar.addfile(info)
        for name, data in files.items():
            info = tarfile.TarInfo(f"{top}/{name}")
            info.size = len(data)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(data))
    return path


def make_zip(path: Path, files: Dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in files.items():
            zf.writestr(name, data)
    return path


@pytest.fixture
def runtime_files():
    return {
        "bin/python3": b"#!fake interpreter\n",
        "lib/python3.11/os.py": b"# os module\n",
    }


@pytest.fixture
def tar_gz_bytes(tmp_path, runtime_files) -> bytes:
    archive = make_tar_gz(tmp_path / "fixture.tar.gz", runtime_files)
    data = archive.read_bytes()
    archive.unlink()
    return data


@pytest.fixture
def clean_env(monkeypatch):
    """Drop PYBUNDLE_* variables so defaults apply."""
    import os
    for key in list(os.environ):
        if key.startswith("PYBUNDLE_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def tar_gz_factory():
    return make_tar_gz


@pytest.fixture
def zip_factory():
    return make_zip
