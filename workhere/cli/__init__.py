"""Command-line interface for workhere.

This package provides the CLI entry point and argument parsing.
"""

from .main import main
from .args import build_parser, parse_args

__all__ = ["main", "build_parser", "parse_args"]
