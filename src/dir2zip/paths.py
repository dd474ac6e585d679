"""Path normalization and archive entry naming helpers."""

import os
import posixpath

from dir2zip.types import PathType


def to_posix(path: str) -> str:
    """Convert host path separators to forward slashes.

    Args:
        path: A path using the host's separator convention.

    Returns:
        The same path with every host separator replaced by "/".

    Example:
        >>> to_posix("sub/b.txt")
        'sub/b.txt'
    """
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    if os.altsep and os.altsep != "/":
        path = path.replace(os.altsep, "/")
    return path


def normalize_relative_path(path: PathType) -> str:
    """Normalize a path relative to the archive root for exact comparison.

    Collapses redundant separators, "." segments and "x/.." pairs, strips any
    trailing separator and converts the result to forward slashes. The result is
    the canonical form used both for exclusion entries and for candidate paths
    produced during traversal.

    Args:
        path: The relative path to normalize.

    Returns:
        The normalized forward-slash path. The root itself normalizes to ".".

    Example:
        >>> normalize_relative_path("./sub//c.txt")
        'sub/c.txt'
        >>> normalize_relative_path("sub/")
        'sub'
        >>> normalize_relative_path("sub/../a.txt")
        'a.txt'
    """
    return posixpath.normpath(to_posix(os.path.normpath(os.fspath(path))))


def resolve_path(path: PathType) -> str:
    """Return the absolute, normalized form of a path without following symlinks."""
    return os.path.normpath(os.path.abspath(os.fspath(path)))


def archive_entry_name(relative_path: str, base_directory: str = "") -> str:
    """Compute the name a file is stored under inside the archive.

    Args:
        relative_path: The file's path relative to the source root.
        base_directory: Name prefixed onto the entry when the archive should unpack
            into its own folder. Empty for a flattened archive.

    Returns:
        The forward-slash entry name.

    Example:
        >>> archive_entry_name("sub/b.txt")
        'sub/b.txt'
        >>> archive_entry_name("sub/b.txt", "project")
        'project/sub/b.txt'
    """
    name = to_posix(relative_path)
    if base_directory:
        return posixpath.join(to_posix(base_directory), name)
    return name
