"""Worktree operations service for workhere."""

import codecs
import subprocess
import sys
from typing import List

import git

from workhere.constants import BRANCH_LOOKAHEAD, PORCELAIN_BRANCH, PORCELAIN_WORKTREE
from workhere.exceptions import GitOperationError
from workhere.logging_config import get_logger
from workhere.models.worktree import WorktreeRecord

logger = get_logger(__name__)


def parse_worktree_porcelain(output: str) -> List[WorktreeRecord]:
    """Parse ``git worktree list --porcelain`` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    Entries without a ``branch refs/heads/...`` line among the next
    BRANCH_LOOKAHEAD lines of their block (detached HEAD, bare) are dropped.
    """
    text = output.strip()
    if not text:
        return []

    lines = text.splitlines()
    worktrees: List[WorktreeRecord] = []

    i = 0
    while i < len(lines):
        if lines[i].startswith(PORCELAIN_WORKTREE):
            path = lines[i][len(PORCELAIN_WORKTREE):]
            branch = ""

            j = i + 1
            while j < len(lines) and j <= i + BRANCH_LOOKAHEAD and lines[j] != "":
                if lines[j].startswith(PORCELAIN_BRANCH):
                    branch = lines[j][len(PORCELAIN_BRANCH):]
                    break
                j += 1

            if branch:
                worktrees.append(WorktreeRecord(path=path, branch=branch))

            # Skip the rest of this block
            while i < len(lines) and lines[i] != "":
                i += 1
        i += 1

    return worktrees


def _describe_git_error(command: str, error: git.exc.GitCommandError) -> str:
    """Build a readable message from a GitCommandError."""
    stderr = (error.stderr if hasattr(error, "stderr") and error.stderr else "").strip()
    status = error.status if hasattr(error, "status") else "unknown"

    if stderr:
        return f"{command} failed (exit {status}): {stderr}"
    return f"{command} failed with exit code {status}"


class WorktreeService:
    """Service for reading and changing the worktrees of one repository."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path to the git repository root
        """
        self.repo_path = repo_path

    def _get_repo(self) -> git.Repo:
        """Open the repository.

        A fresh instance is used for each call; nothing is cached between
        git commands.
        """
        return git.Repo(self.repo_path)

    def list_worktrees(self) -> List[WorktreeRecord]:
        """Read the current worktrees.

        Returns:
            Worktrees in the order git reports them, or an empty list if
            git fails.
        """
        try:
            repo = self._get_repo()
            output = repo.git.worktree("list", "--porcelain")
        except Exception as e:
            logger.debug(f"Could not list worktrees: {e}")
            return []

        worktrees = parse_worktree_porcelain(output)
        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def _run_streaming(self, args: List[str], operation: str, target: str) -> None:
        """Run a git command with its output going straight to the terminal.

        stdout is inherited. stderr is copied to ``sys.stderr`` as it
        arrives and also kept, so a failure can carry git's message.

        Raises:
            GitOperationError: If git exits with a non-zero status or
                cannot be started.
        """
        command = [git.Git.GIT_PYTHON_GIT_EXECUTABLE or "git", *args]
        logger.debug(f"Running {' '.join(command)} in {self.repo_path}")

        try:
            process = subprocess.Popen(command, cwd=self.repo_path, stderr=subprocess.PIPE)
        except OSError as e:
            raise GitOperationError(operation, target, str(e)) from e

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        captured = []
        with process:
            for chunk in iter(lambda: process.stderr.read1(4096), b""):
                text = decoder.decode(chunk)
                captured.append(text)
                sys.stderr.write(text)
                sys.stderr.flush()
            captured.append(decoder.decode(b"", final=True))
            returncode = process.wait()

        if returncode != 0:
            stderr = "".join(captured).strip()
            command_name = f"git {' '.join(args[:2])}"
            if stderr:
                error_msg = f"{command_name} failed (exit {returncode}): {stderr}"
            else:
                error_msg = f"{command_name} failed with exit code {returncode}"
            logger.error(f"{operation} failed for {target}: {error_msg}")
            raise GitOperationError(operation, target, error_msg)

    def add_worktree(self, path: str, branch: str) -> None:
        """Create a worktree at ``path`` on a new branch ``branch``.

        Raises:
            GitOperationError: If git refuses to create the worktree.
        """
        self._run_streaming(["worktree", "add", "-b", branch, path], "worktree add", branch)
        logger.info(f"Added worktree for {branch} at {path}")

    def remove_worktree(self, path: str, force: bool = False) -> None:
        """Remove the worktree at ``path``.

        Args:
            path: Path to the worktree directory
            force: Force removal even if working tree is dirty or locked

        Raises:
            GitOperationError: If git refuses to remove the worktree.
        """
        args = ["worktree", "remove", path]
        if force:
            args.append("--force")

        self._run_streaming(args, "worktree remove", path)
        logger.info(f"Removed worktree at {path}")

    def delete_branch(self, branch: str, force: bool = False) -> None:
        """Delete a local branch with ``git branch -d`` (``-D`` when forced).

        Raises:
            GitOperationError: If git refuses to delete the branch.
        """
        flag = "-D" if force else "-d"
        try:
            repo = self._get_repo()
            repo.git.branch(flag, branch)
        except git.exc.GitCommandError as e:
            error_msg = _describe_git_error(f"git branch {flag}", e)
            logger.debug(f"Failed to delete branch {branch}: {error_msg}")
            raise GitOperationError("branch delete", branch, error_msg) from e

        logger.info(f"Deleted branch {branch}{' (forced)' if force else ''}")
