"""Worktree manager: the add, remove, reset and list commands."""

import os
import random
from typing import Callable, List, Optional

from workhere.exceptions import (
    GitOperationError,
    ScriptExecutionError,
    WorkhereError,
    WorktreeExistsError,
    WorktreeNotFoundError,
)
from workhere.logging_config import get_logger
from workhere.models.options import CreateOptions, RemoveOptions
from workhere.models.worktree import WorktreeRecord
from workhere.services.display_service import DisplayService
from workhere.services.git.repository import check_git_repository, check_repository_root
from workhere.services.git.worktrees import WorktreeService
from workhere.services.naming import generate_branch_name
from workhere.services.paths import (
    filter_managed,
    get_folder_name,
    get_worktree_dir,
    is_managed_path,
)
from workhere.services.scripts import run_script

logger = get_logger(__name__)


class WorktreeManager:
    """Runs workhere commands against the repository in ``current_dir``.

    Every public command returns a process exit code. Helpers raise
    WorkhereError subclasses; the commands turn them into a diagnostic on
    stderr and exit code 1.
    """

    def __init__(
        self,
        current_dir: str,
        worktree_service: Optional[WorktreeService] = None,
        display_service: Optional[DisplayService] = None,
        rng: Optional[random.Random] = None,
        script_runner: Callable[[str, str], None] = run_script,
    ):
        self.current_dir = current_dir
        self.worktree_service = worktree_service or WorktreeService(current_dir)
        self.display = display_service or DisplayService()
        self.rng = rng
        self.script_runner = script_runner

    def _check_repository(self) -> str:
        """Run both repository guards and return the repository root."""
        check_git_repository(self.current_dir)
        return check_repository_root(self.current_dir)

    def _managed_worktrees(self, repo_root: str, custom_dir: Optional[str]) -> List[WorktreeRecord]:
        worktree_dir = get_worktree_dir(repo_root, custom_dir)
        return filter_managed(self.worktree_service.list_worktrees(), worktree_dir, repo_root)

    def add(self, branch: Optional[str] = None, options: Optional[CreateOptions] = None) -> int:
        """Create a managed worktree on a new branch."""
        options = options or CreateOptions()
        try:
            repo_root = self._check_repository()

            branch_name = branch or generate_branch_name(self.rng)
            folder_name = get_folder_name(repo_root, branch_name, options.prefix)

            worktree_dir = get_worktree_dir(repo_root, options.dir)
            os.makedirs(worktree_dir, exist_ok=True)
            worktree_path = os.path.join(worktree_dir, folder_name)

            existing = self.worktree_service.list_worktrees()
            if any(wt.path == worktree_path for wt in existing):
                raise WorktreeExistsError(branch_name, worktree_path)

            self.display.info(f"Creating worktree '{branch_name}' at {worktree_path}...")
            try:
                self.worktree_service.add_worktree(worktree_path, branch_name)
            except GitOperationError as e:
                self.display.error(f"Error creating worktree: {e.message}")
                return 1
            self.display.success(
                f"Worktree '{branch_name}' created successfully at {worktree_path}"
            )

            if options.script:
                self.display.info(f"Executing script: {options.script}")
                try:
                    self.script_runner(options.script, worktree_path)
                except ScriptExecutionError as e:
                    self.display.error(f"Error executing script: {e}")
                    return 1

            self.display.info("\nNext steps:")
            self.display.info(f"cd {worktree_path}")
            return 0
        except WorkhereError as e:
            self.display.error(str(e))
            return 1

    def remove(self, branch: str, options: Optional[RemoveOptions] = None) -> int:
        """Remove the managed worktree checked out on ``branch``."""
        options = options or RemoveOptions()
        try:
            repo_root = self._check_repository()
            worktree_dir = get_worktree_dir(repo_root, options.dir)

            target = next(
                (
                    wt for wt in self.worktree_service.list_worktrees()
                    if wt.branch == branch and is_managed_path(wt.path, worktree_dir)
                ),
                None,
            )
            if target is None:
                raise WorktreeNotFoundError(branch)

            self.display.info(f"Removing worktree '{branch}' at {target.path}...")
            try:
                self._remove_worktree(target, options.force)
            except GitOperationError as e:
                self.display.error(f"Error removing worktree: {e.message}")
                if not options.force:
                    self.display.info("Use --force to force removal")
                return 1
            return 0
        except WorkhereError as e:
            self.display.error(str(e))
            return 1

    def reset(self, options: Optional[RemoveOptions] = None) -> int:
        """Remove every managed worktree, continuing past failures."""
        options = options or RemoveOptions()
        try:
            repo_root = self._check_repository()
        except WorkhereError as e:
            self.display.error(str(e))
            return 1

        worktrees = self._managed_worktrees(repo_root, options.dir)
        if not worktrees:
            self.display.info("No worktrees found to remove.")
            return 0

        self.display.show_removal_plan(worktrees)

        failed = 0
        for wt in worktrees:
            self.display.info(f"\nRemoving worktree '{wt.branch}'...")
            try:
                self._remove_worktree(wt, options.force)
            except GitOperationError as e:
                failed += 1
                self.display.error(f"Error removing worktree '{wt.branch}': {e.message}")
                if not options.force:
                    self.display.info("Use --force to force removal")

        if failed:
            self.display.note(
                f"\nRemoved {len(worktrees) - failed} of {len(worktrees)} worktree(s); "
                f"{failed} failed."
            )
        else:
            self.display.success("\nAll worktrees removed successfully.")
        return 0

    def list_worktrees(self, custom_dir: Optional[str] = None) -> int:
        """Print the managed worktrees."""
        try:
            repo_root = self._check_repository()
        except WorkhereError as e:
            self.display.error(str(e))
            return 1

        self.display.show_worktrees(self._managed_worktrees(repo_root, custom_dir))
        return 0

    def _remove_worktree(self, worktree: WorktreeRecord, force: bool) -> None:
        """Remove a worktree, then try to delete its branch.

        Raises:
            GitOperationError: If the worktree itself cannot be removed.
                Branch deletion failures are only reported.
        """
        self.worktree_service.remove_worktree(worktree.path, force=force)
        self.display.success(f"Worktree '{worktree.branch}' removed successfully.")
        self._delete_branch(worktree.branch, force)

    def _delete_branch(self, branch: str, force: bool) -> None:
        try:
            self.worktree_service.delete_branch(branch)
            self.display.info(f"Deleted branch '{branch}'")
            return
        except GitOperationError as e:
            logger.debug(f"Safe delete of {branch} failed: {e}")

        if not force:
            self.display.note(f"Could not delete branch '{branch}' (use --force to force delete)")
            return

        try:
            self.worktree_service.delete_branch(branch, force=True)
            self.display.info(f"Force deleted branch '{branch}'")
        except GitOperationError as e:
            self.display.note(f"Could not delete branch '{branch}': {e.message}")
