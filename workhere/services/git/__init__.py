"""Git-related services for workhere."""

from .repository import check_git_repository, check_repository_root
from .worktrees import WorktreeService, parse_worktree_porcelain

__all__ = [
    "check_git_repository",
    "check_repository_root",
    "WorktreeService",
    "parse_worktree_porcelain",
]
