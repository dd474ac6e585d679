"""Directory to zip archive packaging utilities.

This package builds a single compressed archive from a directory tree, optionally
nesting every entry under the source directory's name and skipping specific files
or subdirectories by their exact relative path.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2zip")
except PackageNotFoundError:
    __version__ = "unknown"
