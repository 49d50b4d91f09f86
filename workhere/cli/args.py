"""Command-line argument parsing for workhere."""

import argparse
from typing import Optional, Sequence

from workhere.__version__ import __version__

DIR_HELP = "Directory holding managed worktrees (default: .git/worktree, or $WORKHERE_DIR)"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="workhere",
        description="Manage git worktrees",
        epilog="Run from the root of a git repository. Worktrees are created under .git/worktree.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"workhere {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    add_parser = subparsers.add_parser("add", help="Create a new git worktree")
    add_parser.add_argument(
        "branch", nargs="?", help="Branch to create (default: a random name)"
    )
    add_parser.add_argument(
        "-s", "--script", metavar="NAME", help="Script to execute after creating worktree"
    )
    add_parser.add_argument(
        "-p",
        "--prefix",
        action="store_true",
        help="Prefix the worktree folder name with the repository directory name",
    )
    add_parser.add_argument("-d", "--dir", help=DIR_HELP)

    remove_parser = subparsers.add_parser(
        "remove", aliases=["rm"], help="Remove a specific git worktree"
    )
    remove_parser.add_argument("branch", help="Branch of the worktree to remove")
    remove_parser.add_argument(
        "-f", "--force", action="store_true", help="Force removal even if worktree is dirty"
    )
    remove_parser.add_argument("-d", "--dir", help=DIR_HELP)

    reset_parser = subparsers.add_parser("reset", help="Remove all git worktrees")
    reset_parser.add_argument(
        "-f", "--force", action="store_true", help="Force removal even if worktree is dirty"
    )
    reset_parser.add_argument("-d", "--dir", help=DIR_HELP)

    list_parser = subparsers.add_parser("list", aliases=["ls"], help="List all git worktrees")
    list_parser.add_argument("-d", "--dir", help=DIR_HELP)

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
