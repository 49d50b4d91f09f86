"""Worktree data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorktreeRecord:
    """A worktree entry read from ``git worktree list --porcelain``."""

    path: str
    branch: str  # Short name, refs/heads/ stripped

    def __str__(self) -> str:
        """String representation of worktree."""
        return f"{self.branch} -> {self.path}"
