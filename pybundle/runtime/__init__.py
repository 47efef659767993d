"""
Runtime provisioning: platform table, download, extraction, install pipeline.
"""

from .download import download
from .extract import extract_archive, extract_tar_gz, extract_zip
from .install import (
    get_python_dir,
    get_resources_dir,
    is_installed,
    setup_python,
    uninstall_python,
)
from .platforms import (
    PLATFORMS,
    PYTHON_OFFICIAL_VERSION,
    PYTHON_VERSION,
    RELEASE_TAG,
    ArchiveType,
    DownloadDescriptor,
    get_platform_key,
    resolve_platform,
    supported_platforms,
)

__all__ = [
    "PLATFORMS", "PYTHON_VERSION", "PYTHON_OFFICIAL_VERSION", "RELEASE_TAG",
    "ArchiveType", "DownloadDescriptor",
    "get_platform_key", "resolve_platform", "supported_platforms",
    "download",
    "extract_archive", "extract_tar_gz", "extract_zip",
    "get_resources_dir", "get_python_dir", "is_installed",
    "setup_python", "uninstall_python",
]
