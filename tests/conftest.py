"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from convcommit.message import CommitMessage, CommitType


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / "repo" / ".git"
    git_dir.mkdir(parents=True)
    return temp_dir / "repo"


@pytest.fixture
def mock_global_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    config_dir = temp_dir / ".convcommit"
    mocker.patch("convcommit.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def sample_message():
    """Sample commit message with every field filled in."""
    return CommitMessage(
        type=CommitType.FEAT,
        scope="api",
        subject="add login",
        body="Accept username and password on /login.",
        breaking=True,
        breaking_description="sessions issued before this change are invalid",
        issues="#42",
    )


@pytest.fixture
def mock_popen(mocker):
    """Mock subprocess.Popen for git commit; the child exits 0."""
    proc = MagicMock()
    proc.wait.return_value = 0
    mock = mocker.patch("subprocess.Popen", return_value=proc)
    mock.proc = proc
    return mock
