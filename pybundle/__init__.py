"""
pybundle - fetch a standalone Python runtime for bundling with a desktop application.

Resolves the platform, downloads an install-only CPython archive and unpacks it
under resources/python/<platform-key>/python.
"""

__version__ = "0.1.0"

from .config import ProvisionConfig, load_env
from .errors import (
    DownloadError,
    PyBundleError,
    TooManyRedirectsError,
    UnsupportedArchiveError,
    UnsupportedPlatformError,
)
from .logger import get_logger, setup_logging
from .runtime import (
    PLATFORMS,
    PYTHON_VERSION,
    ArchiveType,
    DownloadDescriptor,
    get_platform_key,
    is_installed,
    resolve_platform,
    setup_python,
    uninstall_python,
)

__all__ = [
    "__version__",
    # Config
    "ProvisionConfig",
    "load_env",
    # Errors
    "PyBundleError",
    "UnsupportedPlatformError",
    "DownloadError",
    "TooManyRedirectsError",
    "UnsupportedArchiveError",
    # Logging
    "get_logger",
    "setup_logging",
    # Runtime
    "PLATFORMS",
    "PYTHON_VERSION",
    "ArchiveType",
    "DownloadDescriptor",
    "get_platform_key",
    "resolve_platform",
    "is_installed",
    "setup_python",
    "uninstall_python",
]
