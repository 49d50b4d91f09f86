"""Pytest fixtures for workhere tests"""
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from workhere.services.display_service import DisplayService
from workhere.services.git.worktrees import WorktreeService


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # git reports resolved paths, so resolve symlinked temp dirs up front
        yield Path(tmpdir).resolve()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    repo.close()


@pytest.fixture
def repo_root(git_repo):
    """Root directory of the test repository as a string."""
    return git_repo.working_dir


@pytest.fixture
def porcelain_output():
    """Porcelain listing for a repository with two managed worktrees."""
    return (
        "worktree /r\n"
        "HEAD abcdef123456\n"
        "branch refs/heads/main\n"
        "\n"
        "worktree /r/.git/worktree/feature\n"
        "HEAD fedcba654321\n"
        "branch refs/heads/feature\n"
        "\n"
        "worktree /r/.git/worktree/bugfix\n"
        "HEAD 123456abcdef\n"
        "branch refs/heads/bugfix\n"
    )


@pytest.fixture
def mock_worktree_service():
    """Create a mock WorktreeService with no worktrees."""
    service = Mock(spec=WorktreeService)
    service.list_worktrees = Mock(return_value=[])
    service.add_worktree = Mock(return_value=None)
    service.remove_worktree = Mock(return_value=None)
    service.delete_branch = Mock(return_value=None)
    return service


@pytest.fixture
def mock_display():
    """Create a mock DisplayService."""
    return Mock(spec=DisplayService)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by main() so they do not outlive captured streams."""
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    yield
    for handler in root_logger.handlers[:]:
        if handler not in before:
            root_logger.removeHandler(handler)
