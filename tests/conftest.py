"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest

from git_online.config.settings import get_settings
from tests.helpers import git

GITHUB_REMOTE = "https://github.com/acme/widgets.git"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep settings isolated from the developer's environment."""
    for name in (
        "GIT_ONLINE_GITLAB_HOSTS",
        "GIT_ONLINE_GITEA_HOSTS",
        "GIT_ONLINE_DEFAULT_BRANCH",
        "GIT_ONLINE_REVISION_MODE",
        "GIT_ONLINE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def local_repo(tmp_path: Path) -> Path:
    """Create a git repository with committed files and no remote."""
    repo_path = tmp_path / "widgets"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo_path, "config", "user.email", "test@test.com")
    git(repo_path, "config", "user.name", "Test")
    git(repo_path, "config", "commit.gpgsign", "false")

    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "guide.md").write_text("# Guide\n")
    (repo_path / "README.md").write_text("# Widgets\n")
    (repo_path / "src" / "app").mkdir(parents=True)
    (repo_path / "src" / "app" / "main.py").write_text("print('hello')\n")

    git(repo_path, "add", ".")
    git(repo_path, "commit", "-m", "Initial commit")
    return repo_path


@pytest.fixture
def git_repo(local_repo: Path, tmp_path: Path) -> Path:
    """Create a repository tracking origin/main, with origin pointing at GitHub."""
    bare = tmp_path / "remote.git"
    subprocess.run(["git", "init", "--bare", str(bare)], capture_output=True, check=True)

    git(local_repo, "remote", "add", "origin", str(bare))
    git(local_repo, "push", "-u", "origin", "main")
    git(local_repo, "remote", "set-url", "origin", GITHUB_REMOTE)
    return local_repo
