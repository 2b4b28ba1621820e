"""Command-line argument parsing for treesketch.

This module defines the command-line interface for treesketch,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import List

from treesketch import __version__
from treesketch.exclusion_rules.ignore_file import IGNORE_FILE_NAME
from treesketch.exclusion_rules.name_rules import DEFAULT_IGNORED_NAMES, parse_ignore_list


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with treesketch's options.
    """
    description = """
    treesketch: sketch a directory tree as text.

    Scans a directory, or loads a tree saved as JSON, and prints it as ASCII art,
    as a Markdown-style nested list, or as JSON that can be edited and loaded again.

    Exclusions match entry names exactly. A name excluded at some level removes
    that entry and everything beneath it. The scanned directory itself is always
    included.
    """

    epilog = f"""
    Examples:
      # ASCII tree of a project, skipping {", ".join(DEFAULT_IGNORED_NAMES)}
      treesketch /path/to/project

      # Also skip names listed in each directory's .gitignore
      treesketch -g /path/to/project

      # Skip extra names, as separate options or a comma-separated list
      treesketch -i dist -i build /path/to/project
      treesketch --ignore-list "dist, build, .venv" /path/to/project

      # Markdown list instead of ASCII art
      treesketch -f list /path/to/project

      # Save the tree as JSON, then render the saved file later
      treesketch -f json -o tree.json /path/to/project
      treesketch --load tree.json
    """

    parser = argparse.ArgumentParser(
        prog="treesketch",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treesketch {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="The directory to scan. Omit when using --load.",
    )
    parser.add_argument(
        "-l",
        "--load",
        type=Path,
        metavar="FILE",
        help="Render a tree previously saved as JSON instead of scanning a directory.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Exact file or directory name to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "--ignore-list",
        metavar="NAMES",
        help="Comma-separated list of names to exclude.",
    )
    parser.add_argument(
        "-D",
        "--no-default-ignores",
        action="store_true",
        help=f"Do not exclude the default names ({', '.join(DEFAULT_IGNORED_NAMES)}).",
    )
    parser.add_argument(
        "-g",
        "--use-gitignore",
        action="store_true",
        help="Also exclude the names listed in each directory's ignore file.",
    )
    parser.add_argument(
        "--ignore-file-name",
        default=IGNORE_FILE_NAME,
        metavar="NAME",
        help=f"Name of the per-directory ignore file (default: {IGNORE_FILE_NAME}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["ascii", "list", "json"],
        default="ascii",
        help="Output format (default: ascii).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directory is None and args.load is None:
        raise ValueError("either a directory or --load FILE must be given")
    if args.directory is not None and args.load is not None:
        raise ValueError("a directory and --load FILE cannot be combined")


def collect_ignore_names(args: argparse.Namespace) -> List[str]:
    """Assemble the explicit exclusion names from parsed arguments.

    Returns:
        Names in the order given, defaults first, without duplicates.
    """
    names = [] if args.no_default_ignores else list(DEFAULT_IGNORED_NAMES)
    names.extend(name.strip() for name in args.ignore if name.strip())
    names.extend(parse_ignore_list(args.ignore_list))
    return list(dict.fromkeys(names))
