"""Custom exceptions for workhere"""

from typing import Optional


class WorkhereError(Exception):
    """Base exception for all workhere errors."""
    pass


class RepositoryGuardError(WorkhereError):
    """Exception raised when a precondition on the repository is not met."""
    pass


class NotAGitRepositoryError(RepositoryGuardError):
    """Exception raised when the current directory is not a git repository."""

    def __init__(self):
        super().__init__("Error: Current directory is not a git repository")


class NotRepositoryRootError(RepositoryGuardError):
    """Exception raised when not running from the repository root."""

    def __init__(self, current_dir: str, repo_root: str):
        self.current_dir = current_dir
        self.repo_root = repo_root
        super().__init__("Error: workhere must be run from the repository root")


class WorktreeNotFoundError(WorkhereError):
    """Exception raised when a managed worktree cannot be found."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"Error: Worktree '{branch}' not found")


class WorktreeExistsError(WorkhereError):
    """Exception raised when the target worktree path is already registered."""

    def __init__(self, branch: str, path: str):
        self.branch = branch
        self.path = path
        super().__init__(f"Error: Worktree '{branch}' already exists at {path}")


class GitOperationError(WorkhereError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, target: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.target = target
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if target:
            error_msg += f" for '{target}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ScriptExecutionError(WorkhereError):
    """Exception raised when the post-creation script fails."""

    def __init__(self, script: str, returncode: int):
        self.script = script
        self.returncode = returncode
        super().__init__(f"Command '{script}' returned non-zero exit status {returncode}")
