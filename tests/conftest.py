"""Shared fixtures."""

from unittest.mock import patch

import pytest


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Point user-level configs at tmp_path/home and the repo at tmp_path/repo."""
    home = tmp_path / "home"
    repo = tmp_path / "repo"
    home.mkdir()
    repo.mkdir()
    monkeypatch.setenv("NUDGE_HOME", str(home))
    monkeypatch.chdir(repo)
    return tmp_path


@pytest.fixture
def tty():
    """Pretend stdin is an interactive terminal."""
    with patch("sys.stdin") as mock_stdin:
        mock_stdin.isatty.return_value = True
        yield mock_stdin


@pytest.fixture
def paths(workspace):
    """Where each platform's agent file lands inside the workspace."""
    root = workspace
    return {
        "opencode": root / "home" / ".config" / "opencode" / "agents" / "learn.md",
        "copilot": root / "repo" / ".github" / "agents" / "learn.agent.md",
        "claudecode": root / "home" / ".claude" / "agents" / "learn.md",
    }
