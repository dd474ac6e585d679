"""Command-line interface for dir2zip.

This module provides the command-line entry point. It parses arguments, configures
logging, runs one archiving job and maps failures to exit codes.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Archive a directory
    $ dir2zip ./project dist/project.zip
    Created /abs/dist/project.zip of 1.5 KB
"""

import logging
import sys
from typing import List, Optional

from dir2zip.cli.argparser import create_parser, validate_args
from dir2zip.dir2zip import DirArchiver
from dir2zip.exceptions import ArchiveWarning
from dir2zip.exclusion_rules.path_rules import PathExclusionRules

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Configure root logging on stderr for the requested verbosity."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def collect_excluded_paths(excludes: List[str], exclude_files: List[str]) -> List[str]:
    """Merge exclusion paths given directly with those read from exclusion files.

    Raises:
        FileNotFoundError: If an exclusion file does not exist.
    """
    rules = PathExclusionRules(excludes)
    if exclude_files:
        rules.load_rules(exclude_files)
    return sorted(rules.paths)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dir2zip command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        validate_args(args)

        archiver = DirArchiver(
            args.source,
            args.destination,
            include_base_directory=args.include_base_directory,
            excluded_paths=collect_excluded_paths(args.exclude, args.exclude_from),
            follow_symlinks=args.follow_symlinks,
            ignore_patterns=args.ignore,
            ignore_files=args.ignore_from,
            compresslevel=args.level,
        )

        if args.dry_run:
            for name in archiver.list_entries():
                print(name)
            return

        result = archiver.create_archive()
        if not args.quiet:
            print(f"Created {result.destination_path} of {result.human_size}")

    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except ArchiveWarning as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if e.is_permission_denied else 1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
