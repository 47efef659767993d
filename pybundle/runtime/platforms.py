"""
Platform table for the bundled Python runtime.

Maps a platform key ("<os>-<arch>", Node-style names) to the archive that
provides an install-only CPython for it.
"""

import platform
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple
from urllib.parse import urlparse

from ..errors import UnsupportedPlatformError

PYTHON_VERSION = "3.11.9+20240726"
RELEASE_TAG = "20240726"
PYTHON_OFFICIAL_VERSION = "3.11.9"

STANDALONE_BASE_URL = (
    f"https://github.com/indygreg/python-build-standalone/releases/download/{RELEASE_TAG}"
)
OFFICIAL_BASE_URL = f"https://www.python.org/ftp/python/{PYTHON_OFFICIAL_VERSION}"


class ArchiveType(Enum):
    TAR_GZ = "tar.gz"
    ZIP = "zip"


@dataclass(frozen=True)
class DownloadDescriptor:
    """Where to fetch a runtime from and how it is packed."""
    url: str
    archive_type: ArchiveType

    @property
    def filename(self) -> str:
        return urlparse(self.url).path.rsplit("/", 1)[-1]


def _standalone(triple: str) -> DownloadDescriptor:
    return DownloadDescriptor(
        url=f"{STANDALONE_BASE_URL}/cpython-{PYTHON_VERSION}-{triple}-install_only.tar.gz",
        archive_type=ArchiveType.TAR_GZ,
    )


PLATFORMS: Mapping[str, DownloadDescriptor] = MappingProxyType({
    "darwin-arm64": _standalone("aarch64-apple-darwin"),
    "darwin-x64": _standalone("x86_64-apple-darwin"),
    "linux-x64": _standalone("x86_64-unknown-linux-gnu"),
    "linux-arm64": _standalone("aarch64-unknown-linux-gnu"),
    "win32-x64": _standalone("x86_64-pc-windows-msvc-shared"),
    # python-build-standalone has no Windows ARM64 build; use the embeddable package
    "win32-arm64": DownloadDescriptor(
        url=f"{OFFICIAL_BASE_URL}/python-{PYTHON_OFFICIAL_VERSION}-embed-arm64.zip",
        archive_type=ArchiveType.ZIP,
    ),
})

# platform.system() -> os part of the key
SYSTEM_NAMES = {
    "Darwin": "darwin",
    "Linux": "linux",
    "Windows": "win32",
}

# platform.machine() -> arch part of the key
MACHINE_NAMES = {
    "x86_64": "x64",
    "AMD64": "x64",
    "amd64": "x64",
    "arm64": "arm64",
    "ARM64": "arm64",
    "aarch64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}


def get_platform_key() -> str:
    """
    Detect the current platform.

    Returns:
        Platform key like 'darwin-arm64' or 'linux-x64'. Unknown systems and
        machines are passed through lower-cased, so the key may not be in
        PLATFORMS.
    """
    system = platform.system()
    machine = platform.machine()
    os_name = SYSTEM_NAMES.get(system, system.lower())
    arch = MACHINE_NAMES.get(machine, machine.lower())
    return f"{os_name}-{arch}"


def supported_platforms() -> List[str]:
    return list(PLATFORMS)


def resolve_platform(platform_key: Optional[str] = None) -> Tuple[str, DownloadDescriptor]:
    """
    Look up the download for a platform.

    Args:
        platform_key: Explicit key; defaults to the running platform.

    Returns:
        (platform_key, descriptor)

    Raises:
        UnsupportedPlatformError: If the key is not in PLATFORMS.
    """
    key = platform_key or get_platform_key()
    descriptor = PLATFORMS.get(key)
    if descriptor is None:
        raise UnsupportedPlatformError(key, supported_platforms())
    return key, descriptor
