"""Per-command option models."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateOptions:
    """Options for creating a worktree."""

    script: Optional[str] = None  # Command run inside the new worktree
    prefix: bool = False  # Prefix folder name with the repository directory name
    dir: Optional[str] = None  # Custom managed directory (absolute or relative to root)


@dataclass
class RemoveOptions:
    """Options shared by remove and reset."""

    force: bool = False
    dir: Optional[str] = None
