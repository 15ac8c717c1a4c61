"""Configuration constants and settings for commit-fill."""

import json
import os

__version__ = "0.1.0"

DEFAULT_FILL_COLUMN = 72

DEFAULT_PROJECT_WIDTHS = (
    ("emacs", 64),
    ("auctex", 64),
)

CONFIG_ENV_VAR = "COMMIT_FILL_CONFIG"

# git config keys look like `commit-fill.<project>.width`
GIT_CONFIG_SECTION = "commit-fill"
GIT_CONFIG_PATTERN = r"^commit-fill\..*\.width$"


def parse_project_widths(entries):
    """
    Validate (name, width) pairs and return them as a tuple.

    Raises ValueError if validation fails.
    """
    widths = []
    for entry in entries:
        try:
            name, width = entry
        except (TypeError, ValueError):
            raise ValueError(f"Invalid project width entry: {entry!r}")

        if not isinstance(name, str) or not name:
            raise ValueError(f"Project name must be a non-empty string: {name!r}")

        if isinstance(width, bool) or not isinstance(width, int):
            raise ValueError(f"Width for project '{name}' must be an integer")

        if width < 1:
            raise ValueError(f"Width for project '{name}' must be positive")

        widths.append((name, width))
    return tuple(widths)


def read_config_file(path):
    """Read a JSON mapping file: either {"name": width} or [[name, width], ...]."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        raise ValueError(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config file {path} is not valid JSON: {exc}")

    if isinstance(data, dict):
        return parse_project_widths(data.items())
    if isinstance(data, list):
        return parse_project_widths(data)
    raise ValueError(f"Config file {path} must contain an object or a list of pairs")


def parse_git_config_entries(entries):
    """Turn `commit-fill.<project>.width` git config entries into pairs."""
    pairs = []
    prefix = GIT_CONFIG_SECTION + "."
    for key, value in entries:
        if not key.startswith(prefix) or not key.endswith(".width"):
            continue
        name = key[len(prefix):-len(".width")]
        try:
            width = int(value)
        except ValueError:
            raise ValueError(f"git config {key} must be an integer, got {value!r}")
        pairs.append((name, width))
    return parse_project_widths(pairs)


def load_project_widths(config_path=None, git_entries=None):
    """
    Build the effective project width mapping.

    Entries are ordered by priority: git config, then the JSON config file,
    then the built-in defaults. Lookups take the first match, so user entries
    override the defaults.
    """
    widths = []
    if git_entries:
        widths.extend(parse_git_config_entries(git_entries))

    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        widths.extend(read_config_file(config_path))

    widths.extend(DEFAULT_PROJECT_WIDTHS)
    return tuple(widths)
