"""Tests for the repository guards"""
from unittest.mock import patch

import git
import pytest

from workhere.exceptions import NotAGitRepositoryError, NotRepositoryRootError
from workhere.services.git.repository import check_git_repository, check_repository_root


class TestCheckGitRepository:
    """Test check_git_repository."""

    def test_passes_in_repository(self, repo_root):
        assert check_git_repository(repo_root) is None

    def test_passes_in_subdirectory(self, git_repo, temp_dir):
        subdir = temp_dir / "test_repo" / "sub"
        subdir.mkdir()
        assert check_git_repository(str(subdir)) is None

    def test_fails_outside_repository(self, temp_dir):
        with pytest.raises(NotAGitRepositoryError) as exc_info:
            check_git_repository(str(temp_dir))

        assert str(exc_info.value) == "Error: Current directory is not a git repository"

    @patch("workhere.services.git.repository.git.Git")
    def test_fails_when_git_missing(self, mock_git):
        mock_git.return_value.rev_parse.side_effect = git.exc.GitCommandNotFound("git", "not found")

        with pytest.raises(NotAGitRepositoryError):
            check_git_repository("/repo")


class TestCheckRepositoryRoot:
    """Test check_repository_root."""

    @patch("workhere.services.git.repository.git.Git")
    def test_returns_current_dir_at_root(self, mock_git):
        mock_git.return_value.rev_parse.return_value = "/path/to/repo\n"

        assert check_repository_root("/path/to/repo") == "/path/to/repo"
        mock_git.return_value.rev_parse.assert_called_once_with("--show-toplevel")

    @patch("workhere.services.git.repository.git.Git")
    def test_fails_in_subdirectory(self, mock_git):
        mock_git.return_value.rev_parse.return_value = "/path/to/repo"

        with pytest.raises(NotRepositoryRootError) as exc_info:
            check_repository_root("/path/to/repo/subdir")

        assert str(exc_info.value) == "Error: workhere must be run from the repository root"
        assert exc_info.value.repo_root == "/path/to/repo"

    @patch("workhere.services.git.repository.git.Git")
    def test_fails_when_git_cannot_report_root(self, mock_git):
        mock_git.return_value.rev_parse.side_effect = git.exc.GitCommandError(
            "rev-parse", status=128, stderr="fatal: this operation must be run in a work tree"
        )

        with pytest.raises(NotRepositoryRootError):
            check_repository_root("/path/to/repo/.git")

    def test_real_repository_root(self, repo_root):
        assert check_repository_root(repo_root) == repo_root

    def test_real_repository_subdirectory(self, git_repo, temp_dir):
        subdir = temp_dir / "test_repo" / "sub"
        subdir.mkdir()

        with pytest.raises(NotRepositoryRootError):
            check_repository_root(str(subdir))
