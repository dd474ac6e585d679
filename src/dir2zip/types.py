import os
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import FrozenSet, Iterable, NamedTuple, Tuple, Union

from dir2zip.size_format import format_size

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Classification of a filesystem node met during traversal.

    Attributes:
        FILE: Regular file, archived as an entry.
        DIRECTORY: Directory, descended into.
        OTHER: Anything else (unfollowed symlinks, sockets, FIFOs, devices). Skipped.
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class TraversalEntry(NamedTuple):
    """A single filesystem node visited by the tree walker."""

    absolute_path: str
    relative_path: str
    kind: EntryKind


class ArchiveResult(NamedTuple):
    """Outcome of a completed archiving job.

    Attributes:
        destination_path: Absolute path of the written archive.
        size_bytes: Number of bytes written to the destination.
        entry_count: Number of file entries stored in the archive.
    """

    destination_path: str
    size_bytes: int
    entry_count: int

    @property
    def human_size(self) -> str:
        return format_size(self.size_bytes)


@dataclass(frozen=True)
class ArchiveJob:
    """Immutable description of one archiving operation.

    Both paths are stored absolute and normalized so relative-path comparisons made
    during traversal are unambiguous. Use :meth:`create` to build an instance from
    user input.

    Attributes:
        source_root: Absolute path of the directory to archive.
        destination_path: Absolute path of the archive file to write.
        include_base_directory: Whether every entry is nested under the name of
            ``source_root``.
        excluded_paths: Normalized paths, relative to ``source_root``, to skip.
        follow_symlinks: Whether symbolic links are followed during traversal.
        ignore_patterns: Optional gitignore-style patterns applied in addition to
            the exact ``excluded_paths``.
        ignore_files: Absolute paths of gitignore-style files whose patterns are
            applied the same way as ``ignore_patterns``.

    Example:
        >>> job = ArchiveJob.create("/tmp/project", "/tmp/out.zip", True, ["./sub/"])
        >>> job.base_directory
        'project'
        >>> sorted(job.excluded_paths)
        ['sub']
    """

    source_root: str
    destination_path: str
    include_base_directory: bool = False
    excluded_paths: FrozenSet[str] = frozenset()
    follow_symlinks: bool = False
    ignore_patterns: Tuple[str, ...] = ()
    ignore_files: Tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        source_directory: PathType,
        destination_file: PathType,
        include_base_directory: bool = False,
        excluded_paths: Iterable[PathType] = (),
        *,
        follow_symlinks: bool = False,
        ignore_patterns: Iterable[str] = (),
        ignore_files: Iterable[PathType] = (),
    ) -> "ArchiveJob":
        """Build a job, resolving paths and normalizing exclusion entries."""
        from dir2zip.paths import normalize_relative_path, resolve_path

        return cls(
            source_root=resolve_path(source_directory),
            destination_path=resolve_path(destination_file),
            include_base_directory=include_base_directory,
            excluded_paths=frozenset(normalize_relative_path(p) for p in excluded_paths if os.fspath(p)),
            follow_symlinks=follow_symlinks,
            ignore_patterns=tuple(ignore_patterns),
            ignore_files=tuple(resolve_path(f) for f in ignore_files),
        )

    @property
    def base_directory(self) -> str:
        return os.path.basename(self.source_root)
