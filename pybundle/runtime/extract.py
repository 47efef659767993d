"""
Archive extraction for downloaded runtimes.
"""

import tarfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import Iterator, Optional

from ..errors import UnsupportedArchiveError
from ..logger import get_logger
from .platforms import ArchiveType

logger = get_logger("pybundle.extract")


def _strip_components(name: str, count: int) -> Optional[str]:
    parts = [p for p in PurePosixPath(name).parts if p not in ("", ".")]
    if len(parts) <= count:
        return None
    return str(PurePosixPath(*parts[count:]))


def _stripped_members(tar: tarfile.TarFile, count: int) -> Iterator[tarfile.TarInfo]:
    for member in tar.getmembers():
        name = _strip_components(member.name, count)
        if name is None:
            continue
        member.name = name
        # hard link targets are archive paths and need the same prefix removed
        if member.islnk():
            target = _strip_components(member.linkname, count)
            if target is None:
                continue
            member.linkname = target
        yield member


def extract_tar_gz(archive: Path, dest_dir: Path, strip: int = 1) -> Path:
    """
    Extract a gzip tarball, dropping the leading ``strip`` path components.

    Members left with no path after stripping (the top-level directory
    itself) are skipped.

    Args:
        archive: Path to the .tar.gz file.
        dest_dir: Directory to extract to; created if missing.
        strip: Number of leading components to remove.

    Returns:
        dest_dir
    """
    logger.info(f"Extracting tar.gz to {dest_dir}...")
    dest_dir.mkdir(parents=True, exist_ok=True)
    with tarfile.open(archive, "r:gz") as tar:
        tar.extractall(dest_dir, members=_stripped_members(tar, strip), filter="data")
    logger.info("Extraction completed!")
    return dest_dir


def extract_zip(archive: Path, dest_dir: Path) -> Path:
    """
    Extract every entry of a zip archive, overwriting existing files.

    Returns:
        dest_dir
    """
    logger.info(f"Extracting zip to {dest_dir}...")
    dest_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive, "r") as zip_ref:
        zip_ref.extractall(dest_dir)
    logger.info("Extraction completed!")
    return dest_dir


def extract_archive(archive: Path, dest_dir: Path, archive_type: ArchiveType) -> Path:
    """Extract ``archive`` into ``dest_dir`` with the extractor for ``archive_type``."""
    if archive_type is ArchiveType.TAR_GZ:
        return extract_tar_gz(archive, dest_dir)
    if archive_type is ArchiveType.ZIP:
        return extract_zip(archive, dest_dir)
    raise UnsupportedArchiveError(f"Unsupported archive type: {archive_type}")
