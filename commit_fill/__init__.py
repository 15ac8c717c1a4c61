"""commit-fill: per-project fill column for commit messages."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import (  # noqa: F401
    DEFAULT_FILL_COLUMN,
    DEFAULT_PROJECT_WIDTHS,
    __version__,
    load_project_widths,
    parse_project_widths,
)
from .git import (  # noqa: F401
    get_config_entries,
    get_hooks_dir,
    get_remote_url,
    run,
)
from .resolver import apply, extract_project_name, format_notice, resolve_width  # noqa: F401
from .session import (  # noqa: F401
    CommitSession,
    CommitSessionHooks,
    project_fill_column_hook,
)
from .wrap import fill_message  # noqa: F401

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Config
    "DEFAULT_FILL_COLUMN",
    "DEFAULT_PROJECT_WIDTHS",
    "load_project_widths",
    "parse_project_widths",
    # Git
    "run",
    "get_remote_url",
    "get_config_entries",
    "get_hooks_dir",
    # Resolver
    "extract_project_name",
    "resolve_width",
    "apply",
    "format_notice",
    # Session
    "CommitSession",
    "CommitSessionHooks",
    "project_fill_column_hook",
    # Wrap
    "fill_message",
]
