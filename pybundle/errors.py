"""Exceptions raised while provisioning a Python runtime."""

from typing import Iterable, Optional


class PyBundleError(RuntimeError):
    """Base class for provisioning failures."""


class UnsupportedPlatformError(PyBundleError):
    """No download is known for the requested platform key."""

    def __init__(self, platform_key: str, supported: Iterable[str]):
        self.platform_key = platform_key
        self.supported = list(supported)
        super().__init__(
            f"Unsupported platform: {platform_key}. "
            f"Supported platforms: {', '.join(self.supported)}"
        )


class DownloadError(PyBundleError):
    """The archive could not be fetched."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TooManyRedirectsError(DownloadError):
    """The server kept redirecting past the configured cap."""


class UnsupportedArchiveError(PyBundleError):
    """The archive format has no extractor."""
