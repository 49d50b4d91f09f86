"""Configuration handling for workhere"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from workhere.constants import ENV_LOG_LEVEL, ENV_WORKTREE_DIR
from workhere.models.options import CreateOptions, RemoveOptions


@dataclass
class Config:
    """Configuration for a single workhere invocation with validation."""

    script: Optional[str] = None
    prefix: bool = False
    force: bool = False
    dir: Optional[str] = None
    log_level: str = "warning"  # debug, info, warning

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_script()
        self._validate_dir()
        self._validate_log_level()

    def _validate_script(self):
        """Validate script is not blank when given."""
        if self.script is not None and not self.script.strip():
            raise ValueError("script cannot be empty")

    def _validate_dir(self):
        """Validate dir is not blank when given."""
        if self.dir is not None:
            if not self.dir.strip():
                raise ValueError("dir cannot be empty")
            self.dir = self.dir.strip()

    def _validate_log_level(self):
        """Validate log_level is one of allowed values."""
        allowed = ["debug", "info", "warning"]
        self.log_level = self.log_level.lower()
        if self.log_level not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{self.log_level}'")

    @property
    def debug(self) -> bool:
        return self.log_level == "debug"

    def to_create_options(self) -> CreateOptions:
        return CreateOptions(script=self.script, prefix=self.prefix, dir=self.dir)

    def to_remove_options(self) -> RemoveOptions:
        return RemoveOptions(force=self.force, dir=self.dir)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "script": self.script,
            "prefix": self.prefix,
            "force": self.force,
            "dir": self.dir,
            "log_level": self.log_level,
        }

    @classmethod
    def from_args(cls, parsed_args, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Create Config from parsed command-line arguments.

        Values missing from the command line are taken from the environment
        (WORKHERE_DIR, WORKHERE_LOG_LEVEL).
        """
        if environ is None:
            environ = os.environ

        custom_dir = getattr(parsed_args, "dir", None) or environ.get(ENV_WORKTREE_DIR) or None
        return cls(
            script=getattr(parsed_args, "script", None),
            prefix=getattr(parsed_args, "prefix", False),
            force=getattr(parsed_args, "force", False),
            dir=custom_dir,
            log_level=environ.get(ENV_LOG_LEVEL, "warning") or "warning",
        )
