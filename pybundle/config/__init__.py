"""
Configuration - env parsing and the provisioning config record.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .env_config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_USER_AGENT,
    get_chunk_size_from_env,
    get_int_env,
    get_max_redirects_from_env,
    get_resources_root_from_env,
    get_show_progress_from_env,
    get_user_agent_from_env,
    load_env,
    parse_bool_env,
)


@dataclass(frozen=True)
class ProvisionConfig:
    """
    Settings for a single provisioning run.

    This class is immutable (frozen=True). To modify, use with_overrides()
    which returns a new instance.

    Attributes:
        resources_root: Directory holding one <platform-key>/ folder per runtime
        user_agent: User-Agent header sent with every request
        max_redirects: Redirect hops followed before giving up
        chunk_size: Bytes read per chunk while streaming the archive
        show_progress: Whether to write the percentage line to stdout
    """
    resources_root: Path = field(default_factory=lambda: Path.cwd() / "resources" / "python")
    user_agent: str = DEFAULT_USER_AGENT
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    show_progress: bool = True

    @classmethod
    def from_env(cls) -> "ProvisionConfig":
        return cls(
            resources_root=get_resources_root_from_env(),
            user_agent=get_user_agent_from_env(),
            max_redirects=get_max_redirects_from_env(),
            chunk_size=get_chunk_size_from_env(),
            show_progress=get_show_progress_from_env(),
        )

    def with_overrides(
        self,
        resources_root: Optional[Path] = None,
        user_agent: Optional[str] = None,
        max_redirects: Optional[int] = None,
        chunk_size: Optional[int] = None,
        show_progress: Optional[bool] = None,
    ) -> "ProvisionConfig":
        return ProvisionConfig(
            resources_root=Path(resources_root) if resources_root is not None else self.resources_root,
            user_agent=user_agent if user_agent is not None else self.user_agent,
            max_redirects=max_redirects if max_redirects is not None else self.max_redirects,
            chunk_size=chunk_size if chunk_size is not None else self.chunk_size,
            show_progress=show_progress if show_progress is not None else self.show_progress,
        )


__all__ = [
    "ProvisionConfig",
    "load_env", "parse_bool_env", "get_int_env",
    "get_resources_root_from_env", "get_user_agent_from_env",
    "get_max_redirects_from_env", "get_chunk_size_from_env",
    "get_show_progress_from_env",
]
