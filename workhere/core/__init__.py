"""Core orchestration for workhere."""

from .manager import WorktreeManager

__all__ = ["WorktreeManager"]
