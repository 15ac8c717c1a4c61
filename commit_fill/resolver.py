"""Resolve a project's commit-message fill column from its remote URL."""


def extract_project_name(remote_url):
    """
    Derive a project name from a remote URL.

    Trailing slashes and a trailing ".git" are dropped, then the last path
    component is returned. Returns None when there is no URL or the name
    comes out empty.
    """
    if remote_url is None:
        return None

    path = remote_url.rstrip("/")
    if path.endswith(".git"):
        path = path[:-4].rstrip("/")

    name = path.rpartition("/")[2]
    return name or None


def resolve_width(project_name, mapping):
    """Return the width of the first mapping entry named `project_name`."""
    if project_name is None:
        return None
    for name, width in mapping:
        if name == project_name:
            return width
    return None


def apply(remote_url, mapping):
    """Resolve the fill column for the repository at `remote_url`, if any."""
    return resolve_width(extract_project_name(remote_url), mapping)


def format_notice(width, project_name):
    """Build the notice shown when a project width is applied."""
    return f"Set fill-column to {width} for project '{project_name}'"
