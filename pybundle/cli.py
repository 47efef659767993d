"""
Command line entry point for pybundle.

    pybundle [PLATFORM] [--resources-dir DIR] [--force] [--quiet]
    pybundle --list
    pybundle --remove [PLATFORM]
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import ProvisionConfig, load_env
from .errors import UnsupportedPlatformError
from .logger import get_logger, setup_logging
from .runtime import (
    PLATFORMS,
    PYTHON_VERSION,
    get_platform_key,
    setup_python,
    uninstall_python,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pybundle",
        description="Download a standalone Python runtime into the application resources directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pybundle                    Set up Python for the current platform
  pybundle linux-x64          Set up Python for another platform
  pybundle --force            Reinstall even if already present
  pybundle --list             Show supported platforms
  pybundle --remove           Remove the runtime for the current platform

Environment (also read from .env):
  PYBUNDLE_RESOURCES_DIR, PYBUNDLE_USER_AGENT, PYBUNDLE_MAX_REDIRECTS,
  PYBUNDLE_CHUNK_SIZE, PYBUNDLE_SHOW_PROGRESS
        """
    )
    parser.add_argument("platform", nargs="?", help="Platform key, e.g. darwin-arm64 (default: current platform)")
    parser.add_argument("--resources-dir", dest="resources_dir", default=None,
                        help="Resources root (default: ./resources/python)")
    parser.add_argument("--force", "-f", action="store_true", help="Reinstall even if already installed")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")
    parser.add_argument("--list", "-l", action="store_true", help="List supported platforms and exit")
    parser.add_argument("--remove", action="store_true", help="Remove the installed runtime for the platform")
    parser.add_argument("-V", "--version", action="store_true", help="Show version information")
    return parser


def cmd_version() -> int:
    print(f"pybundle: v{__version__}")
    print(f"Bundled Python: {PYTHON_VERSION}")
    print(f"Platform: {get_platform_key()}")
    return 0


def cmd_list() -> int:
    for key, descriptor in PLATFORMS.items():
        print(f"{key:<14} {descriptor.archive_type.value:<7} {descriptor.url}")
    return 0


def cmd_remove(platform_key: str, config: ProvisionConfig) -> int:
    try:
        uninstall_python(platform_key, config.resources_root)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_setup(platform_key: str, config: ProvisionConfig, force: bool = False) -> int:
    logger = get_logger()
    logger.info(f"Setting up Python for platform: {platform_key}")
    try:
        setup_python(platform_key, config=config, force=force)
        return 0
    except UnsupportedPlatformError as e:
        print(f"Unsupported platform: {e.platform_key}", file=sys.stderr)
        print(f"Supported platforms: {', '.join(e.supported)}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Setup failed: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    load_env()
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        return cmd_version()
    if args.list:
        return cmd_list()

    config = ProvisionConfig.from_env().with_overrides(
        resources_root=args.resources_dir,
        show_progress=False if args.quiet else None,
    )
    setup_logging(verbose=not args.quiet)
    platform_key = args.platform or get_platform_key()

    if args.remove:
        return cmd_remove(platform_key, config)
    return cmd_setup(platform_key, config, force=args.force)


if __name__ == "__main__":
    sys.exit(main())
