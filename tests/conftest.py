"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest

from link2code.config.settings import get_settings


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


class GitRepo:
    """A working tree cloned from a local bare "remote"."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def git(self, *args: str) -> str:
        return run_git(self.path, *args)

    def commit(self, relative_path: str, content: str, message: str | None = None) -> str:
        """Write a file, commit it and return the full commit hash."""
        file_path = self.path / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        self.git("add", relative_path)
        self.git("commit", "-m", message or f"Update {relative_path}")
        return self.git("rev-parse", "HEAD")

    def push(self) -> None:
        self.git("push", "origin", "HEAD")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are read from the environment on each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _init_config(path: Path) -> None:
    run_git(path, "config", "user.email", "test@test.com")
    run_git(path, "config", "user.name", "Test")
    run_git(path, "config", "commit.gpgsign", "false")


@pytest.fixture
def make_repo(tmp_path: Path):
    """Factory for pushed repositories whose origin points at github.com.

    The clone pushes to a local bare repository, so remote-tracking refs
    exist, then its origin URL is rewritten to the requested value.
    """

    def _make(name: str = "repo", origin: str = "git@github.com:org/repo.git") -> GitRepo:
        bare = tmp_path / f"{name}-origin.git"
        subprocess.run(["git", "init", "--bare", str(bare)], capture_output=True, check=True)

        work = tmp_path / name
        subprocess.run(
            ["git", "clone", str(bare), str(work)], capture_output=True, check=True
        )
        _init_config(work)

        repo = GitRepo(work)
        repo.commit("README.md", "# Test Repo\n", "Initial commit")
        repo.commit("src/main.py", "print('hello')\n", "Add main")
        repo.push()

        repo.git("remote", "set-url", "origin", origin)
        # Pushes keep going to the local bare repo and update refs/remotes/origin/*
        repo.git("config", "remote.origin.pushurl", str(bare))
        return repo

    return _make


@pytest.fixture
def git_repo(make_repo) -> GitRepo:
    """A repository whose HEAD is fully pushed."""
    return make_repo()


@pytest.fixture
def local_only_repo(tmp_path: Path) -> GitRepo:
    """A repository with commits but no remotes at all."""
    path = tmp_path / "local-only"
    path.mkdir()
    run_git(path, "init")
    _init_config(path)
    repo = GitRepo(path)
    repo.commit("README.md", "# Local\n", "Initial commit")
    return repo
