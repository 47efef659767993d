"""
Download-and-unpack pipeline for the bundled Python runtime.

Layout produced under the resources root:

    <root>/<platform-key>/python/        extracted interpreter tree
    <root>/<platform-key>/<archive>      transient, removed after extraction
    <root>/<platform-key>/python.partial extraction in progress
"""

import shutil
from pathlib import Path
from typing import Optional

from ..config import ProvisionConfig
from ..logger import get_logger
from .download import download
from .extract import extract_archive
from .platforms import resolve_platform

logger = get_logger("pybundle.install")


def _root(root: Optional[Path]) -> Path:
    return Path(root) if root is not None else ProvisionConfig.from_env().resources_root


def get_resources_dir(platform_key: str, root: Optional[Path] = None) -> Path:
    """Per-platform directory: <root>/<platform-key>"""
    return _root(root) / platform_key


def get_python_dir(platform_key: str, root: Optional[Path] = None) -> Path:
    """Extracted runtime: <root>/<platform-key>/python"""
    return get_resources_dir(platform_key, root) / "python"


def is_installed(platform_key: str, root: Optional[Path] = None) -> bool:
    """True if the runtime directory for the platform exists."""
    return get_python_dir(platform_key, root).exists()


def setup_python(
    platform_key: Optional[str] = None,
    *,
    config: Optional[ProvisionConfig] = None,
    force: bool = False,
) -> Path:
    """
    Download and unpack the Python runtime for a platform.

    Args:
        platform_key: Target platform; defaults to the running one.
        config: Provisioning settings; defaults to ProvisionConfig.from_env().
        force: Remove an existing runtime and install again.

    Returns:
        Path to the extracted runtime directory.

    Raises:
        UnsupportedPlatformError: If the platform has no download.
        DownloadError: If the archive cannot be fetched.
        UnsupportedArchiveError: If the archive type has no extractor.
    """
    config = config or ProvisionConfig.from_env()
    key, descriptor = resolve_platform(platform_key)

    resources_dir = get_resources_dir(key, config.resources_root)
    python_dir = get_python_dir(key, config.resources_root)
    archive_path = resources_dir / descriptor.filename

    if python_dir.exists():
        if not force:
            logger.info(f"Python already exists at {python_dir}")
            return python_dir
        logger.info(f"Removing existing Python at {python_dir}")
        shutil.rmtree(python_dir)

    archive_type = descriptor.archive_type.value
    logger.info(f"Downloading Python for {key}...")
    logger.info(f"URL: {descriptor.url}")
    logger.info(f"Type: {archive_type}")

    resources_dir.mkdir(parents=True, exist_ok=True)

    download(
        descriptor.url,
        archive_path,
        user_agent=config.user_agent,
        max_redirects=config.max_redirects,
        chunk_size=config.chunk_size,
        show_progress=config.show_progress,
    )

    # python/ only appears after a successful extraction; the archive is kept on failure
    staging_dir = resources_dir / "python.partial"
    if staging_dir.exists():
        shutil.rmtree(staging_dir)
    try:
        extract_archive(archive_path, staging_dir, descriptor.archive_type)
    except BaseException:
        shutil.rmtree(staging_dir, ignore_errors=True)
        raise
    staging_dir.rename(python_dir)

    archive_path.unlink()
    logger.info(f"Cleaned up {archive_type} file")

    logger.info(f"\n✓ Python setup completed at: {python_dir}")
    return python_dir


def uninstall_python(platform_key: str, root: Optional[Path] = None) -> bool:
    """
    Remove the runtime (and any leftover archive) for a platform.

    Returns:
        True if removed, False if nothing was installed.
    """
    resources_dir = get_resources_dir(platform_key, root)
    if not resources_dir.exists():
        logger.info(f"Python for {platform_key} is not installed")
        return False

    shutil.rmtree(resources_dir)
    logger.info(f"✓ Removed {resources_dir}")
    return True
