import subprocess
from pathlib import Path

import pytest


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(cmd):
        subprocess.check_call(f"git -C {repo} {cmd}", shell=True)

    git("init -q")
    return repo, git


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Keep the user's git config and COMMIT_FILL_CONFIG out of tests."""
    monkeypatch.delenv("COMMIT_FILL_CONFIG", raising=False)
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    return


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
