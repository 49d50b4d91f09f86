"""Command-line interface for workhere"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console

from workhere.cli.args import build_parser
from workhere.config import Config
from workhere.core.manager import WorktreeManager
from workhere.logging_config import get_logger, setup_logging

error_console = Console(stderr=True)
logger = get_logger(__name__)

# Aliases resolve to the canonical command name
COMMAND_ALIASES = {"rm": "remove", "ls": "list"}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    try:
        parsed_args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse uses 2 for usage errors; workhere only exits with 0 or 1
        return 0 if e.code in (0, None) else 1

    if parsed_args.command is None:
        parser.print_help(sys.stderr)
        return 1

    config = None
    try:
        config = Config.from_args(parsed_args)
        setup_logging(config.log_level)
        logger.debug(f"Configuration: {config.to_dict()}")

        manager = WorktreeManager(os.getcwd())
        command = COMMAND_ALIASES.get(parsed_args.command, parsed_args.command)

        if command == "add":
            return manager.add(parsed_args.branch, config.to_create_options())
        if command == "remove":
            return manager.remove(parsed_args.branch, config.to_remove_options())
        if command == "reset":
            return manager.reset(config.to_remove_options())
        return manager.list_worktrees(config.dir)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        error_console.print(f"Unexpected error: {e}", style="red", markup=False, highlight=False)
        if config is not None and config.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
