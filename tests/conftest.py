"""Shared test fixtures for git-subscribe."""

import pytest
from git import Repo

from gitsubscribe.registry.store import RegistryStore


@pytest.fixture
def store(tmp_path):
    return RegistryStore(tmp_path / "data" / "data.json")


@pytest.fixture
def make_repo(tmp_path):
    """Create a real git repository under tmp_path and return its path."""

    def _make(name: str = "project") -> str:
        path = tmp_path / name
        Repo.init(path).close()
        return str(path)

    return _make


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point every per-user location at tmp_path."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv("GIT_SUBSCRIBE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("GIT_SUBSCRIBE_CONFIG", str(tmp_path / "missing-config.json"))
    monkeypatch.delenv("GIT_SUBSCRIBE_LOG_FILE", raising=False)
    monkeypatch.delenv("GIT_SUBSCRIBE_LOG_LEVEL", raising=False)
    return data_dir


@pytest.fixture
def make_worktree(tmp_path, make_repo):
    """Create a repository with one commit plus a linked worktree of it."""

    def _make(name: str = "wt") -> str:
        main_path = make_repo("main")
        with Repo(main_path) as repo:
            (tmp_path / "main" / "README").write_text("hello\n")
            repo.index.add(["README"])
            repo.index.commit("initial commit")
            repo.git.worktree("add", str(tmp_path / name))
        return str(tmp_path / name)

    return _make
