"""
Environment variable parsing for pybundle.

Single source of truth for reading PYBUNDLE_* variables.
Used by config.ProvisionConfig and the CLI.
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

DEFAULT_USER_AGENT = "pybundle-setup"
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_CHUNK_SIZE = 64 * 1024


def parse_bool_env(key: str, default: bool) -> bool:
    """
    Parse a boolean from environment variable.

    Accepts: true, false, 1, 0, yes, no, on, off (case-insensitive).
    Unknown values fall back to default.
    """
    value = os.environ.get(key)
    if value is None:
        return default

    value_lower = value.lower().strip()
    if value_lower in ("true", "1", "yes", "on"):
        return True
    if value_lower in ("false", "0", "no", "off", ""):
        return False
    return default


def get_int_env(key: str, default: int) -> int:
    """Parse an integer from environment variable; invalid values fall back to default."""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def load_env(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load a .env file into the environment.

    Variables already set in the environment are left untouched.

    Returns:
        True if a file was found and loaded.
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def get_resources_root_from_env() -> Path:
    """Resources root. PYBUNDLE_RESOURCES_DIR, default ./resources/python."""
    value = os.environ.get("PYBUNDLE_RESOURCES_DIR")
    if value:
        return Path(value)
    return Path.cwd() / "resources" / "python"


def get_user_agent_from_env() -> str:
    """User-Agent header. PYBUNDLE_USER_AGENT."""
    return os.environ.get("PYBUNDLE_USER_AGENT") or DEFAULT_USER_AGENT


def get_max_redirects_from_env() -> int:
    """Redirect cap. PYBUNDLE_MAX_REDIRECTS."""
    return get_int_env("PYBUNDLE_MAX_REDIRECTS", DEFAULT_MAX_REDIRECTS)


def get_chunk_size_from_env() -> int:
    """Download chunk size in bytes. PYBUNDLE_CHUNK_SIZE."""
    return get_int_env("PYBUNDLE_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)


def get_show_progress_from_env() -> bool:
    """Progress line on stdout. PYBUNDLE_SHOW_PROGRESS."""
    return parse_bool_env("PYBUNDLE_SHOW_PROGRESS", True)
