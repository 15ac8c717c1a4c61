"""Core git utilities and subprocess wrappers."""

import shlex
import subprocess


def run(cmd):
    """
    Run a command and return stripped output.

    Accepts either a string (split using shlex) or an argv list. No shell is
    involved, so paths with special characters pass through unchanged.
    """
    args = cmd if isinstance(cmd, (list, tuple)) else shlex.split(cmd)
    return (
        subprocess.check_output(args, stderr=subprocess.STDOUT)
        .decode("utf-8", errors="ignore")
        .strip()
    )


def get_remote_url(name="origin"):
    """
    Return the remote's URL, or None when it is not configured.

    git stderr noise is suppressed; outside a repository this is also None.
    """
    try:
        out = subprocess.check_output(
            ["git", "config", "--get", f"remote.{name}.url"],
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    url = out.decode("utf-8", errors="ignore").strip()
    return url or None


def get_config_entries(pattern):
    """Return (key, value) pairs from `git config --get-regexp`, in file order."""
    try:
        out = subprocess.check_output(
            ["git", "config", "--get-regexp", pattern],
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        # exit status 1 means no matching keys
        return []

    entries = []
    for line in out.decode("utf-8", errors="ignore").splitlines():
        if not line.strip():
            continue
        key, _, value = line.partition(" ")
        entries.append((key, value.strip()))
    return entries


def get_hooks_dir():
    """Get the repository's hooks directory."""
    return run("git rev-parse --git-path hooks")
