"""Data models for workhere."""

from .worktree import WorktreeRecord
from .options import CreateOptions, RemoveOptions

__all__ = ["WorktreeRecord", "CreateOptions", "RemoveOptions"]
