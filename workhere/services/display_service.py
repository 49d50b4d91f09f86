"""Display service for user-facing workhere output."""
from typing import List, Optional

from rich.console import Console

from workhere.models.worktree import WorktreeRecord

console = Console()
error_console = Console(stderr=True)


class DisplayService:
    """Writes status lines to stdout and diagnostics to stderr.

    Paths and branch names are printed without markup or wrapping so they
    can be copied straight from the terminal.
    """

    def info(self, message: str, style: Optional[str] = None) -> None:
        console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)

    def success(self, message: str) -> None:
        self.info(message, style="green")

    def note(self, message: str) -> None:
        self.info(message, style="yellow")

    def error(self, message: str) -> None:
        error_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)

    def show_worktrees(self, worktrees: List[WorktreeRecord]) -> None:
        if not worktrees:
            self.info("No worktrees found.")
            return

        self.info("Current worktrees:")
        for wt in worktrees:
            self.info(f"  {wt.branch} -> {wt.path}")

    def show_removal_plan(self, worktrees: List[WorktreeRecord]) -> None:
        self.info(f"Found {len(worktrees)} worktree(s) to remove:")
        for wt in worktrees:
            self.info(f"  - {wt.branch} at {wt.path}")
