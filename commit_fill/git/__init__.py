"""Git utilities package."""

from .core import (
    get_config_entries,
    get_hooks_dir,
    get_remote_url,
    run,
)

__all__ = [
    "run",
    "get_remote_url",
    "get_config_entries",
    "get_hooks_dir",
]
