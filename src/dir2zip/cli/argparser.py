"""Command-line argument parsing for dir2zip.

This module defines the command-line interface for dir2zip,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dir2zip import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2zip's options.
    """
    description = """
    dir2zip: Package the contents of a directory into a single zip archive.

    Every regular file below SOURCE is stored in DESTINATION, compressed with deflate.
    Entries are added in a deterministic order (sorted, depth-first), and an existing
    archive at DESTINATION is replaced.

    Exclusions given with -x/--exclude are relative to SOURCE and match exactly:
    "sub" leaves out the directory sub and everything in it, "sub/c.txt" leaves out
    that one file. Wildcards are not interpreted there; use -i/--ignore for
    gitignore-style patterns.
    """

    epilog = """
    Examples:
      # Archive a project so it unpacks into the current directory
      dir2zip ./project dist/project.zip

      # Archive a project so it unpacks into a "project" folder
      dir2zip -b ./project dist/project.zip

      # Leave out one file and one directory
      dir2zip -x sub/c.txt -x node_modules ./project dist/project.zip

      # Read exclusion paths from a file, one per line
      dir2zip --exclude-from .distignore ./project dist/project.zip

      # Additionally drop anything matching gitignore-style patterns
      dir2zip -i "*.pyc" -i "__pycache__/" ./project dist/project.zip

      # Reuse the project's .gitignore
      dir2zip --ignore-from project/.gitignore ./project dist/project.zip

      # Show what would be archived without writing anything
      dir2zip -n ./project dist/project.zip
    """

    parser = argparse.ArgumentParser(
        prog="dir2zip",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2zip {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "source",
        type=Path,
        help="The directory to archive. Entry names are relative to this directory.",
    )
    parser.add_argument(
        "destination",
        type=Path,
        help="Path of the zip file to create. An existing file at this path is replaced.",
    )
    parser.add_argument(
        "-b",
        "--include-base-directory",
        action="store_true",
        help="Nest every entry under the name of the source directory.",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        metavar="PATH",
        action="append",
        default=[],
        help="Path relative to the source directory to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "--exclude-from",
        type=Path,
        metavar="FILE",
        action="append",
        default=[],
        help="File listing paths to leave out, one per line (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action="append",
        default=[],
        help="Gitignore-style pattern to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "--ignore-from",
        type=Path,
        metavar="FILE",
        action="append",
        default=[],
        help="File of gitignore-style patterns, such as a .gitignore (can be specified multiple times).",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links. By default, symbolic links are skipped.",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=int,
        default=9,
        metavar="LEVEL",
        help="Deflate compression level from 0 (store) to 9 (best, default).",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="List the entries that would be archived and exit without writing.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging output (-v for progress, -vv for every entry).",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors.",
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
    if not args.source.is_dir():
        raise ValueError(f"'{args.source}' is not a valid directory")
    if args.destination.is_dir():
        raise ValueError(f"Destination '{args.destination}' is a directory")
