"""Path helpers for managed worktrees."""

import os
from typing import Iterable, List, Optional

from workhere.constants import DEFAULT_WORKTREE_DIR
from workhere.models.worktree import WorktreeRecord


def get_worktree_dir(current_dir: str, custom_dir: Optional[str] = None) -> str:
    """Return the directory that holds managed worktrees.

    An absolute ``custom_dir`` is used as is, a relative one is joined onto
    ``current_dir``. Without one, ``<current_dir>/.git/worktree`` is used.
    Custom paths are normalized so they compare equal to the paths git reports.
    """
    if custom_dir:
        if os.path.isabs(custom_dir):
            return os.path.normpath(custom_dir)
        return os.path.normpath(os.path.join(current_dir, custom_dir))
    return os.path.join(current_dir, *DEFAULT_WORKTREE_DIR)


def get_folder_name(current_dir: str, branch: str, prefix: bool = False) -> str:
    """Folder name for a new worktree, optionally prefixed with the repo directory name."""
    if prefix:
        return f"{os.path.basename(current_dir)}-{branch}"
    return branch


def is_managed_path(path: str, worktree_dir: str) -> bool:
    """Check whether ``path`` lies below ``worktree_dir``."""
    base = worktree_dir.rstrip(os.sep) or os.sep
    if base == os.sep:
        return path != os.sep and path.startswith(os.sep)
    return path.startswith(base + os.sep)


def filter_managed(
    worktrees: Iterable[WorktreeRecord], worktree_dir: str, repo_root: str
) -> List[WorktreeRecord]:
    """Managed worktrees, excluding the repository root, in input order."""
    return [
        wt for wt in worktrees
        if is_managed_path(wt.path, worktree_dir) and wt.path != repo_root
    ]
