"""Directory traversal that streams the files of a tree into an archive sink.

This module provides the TreeWalker class, which enumerates a directory tree in a
deterministic depth-first, pre-order sequence, consults exclusion rules for every
node, names each included file for the archive and hands it to an archive sink.
"""

import logging
import os
import stat
from typing import Iterator, List, Optional

from dir2zip.archive_sink.base_sink import ArchiveSink
from dir2zip.exclusion_rules.base_rules import BaseExclusionRules
from dir2zip.paths import archive_entry_name, resolve_path, to_posix
from dir2zip.types import EntryKind, PathType, TraversalEntry

logger = logging.getLogger(__name__)


class TreeWalker:
    """Depth-first walker producing archive entries for a directory tree.

    Children of every directory are visited in lexicographic order, so the same tree
    always yields the same entries in the same order regardless of platform or
    filesystem. Traversal uses an explicit work stack instead of call recursion;
    arbitrarily deep trees cannot exhaust the interpreter's recursion limit.

    Symbolic Link Behavior:
        By default nodes are classified with ``lstat``: symbolic links are neither
        files nor directories and are skipped. With ``follow_symlinks=True`` nodes
        are classified with ``stat``; a link to a file is archived under the link's
        name and a link to a directory is descended into. No loop detection is
        performed beyond what the operating system reports (e.g. ``ELOOP``).

    Error Handling:
        Any ``OSError`` raised while listing a directory or classifying a node is
        propagated unchanged. There is no partial-success mode.

    Attributes:
        root_path (str): Absolute, normalized path of the source root.
        exclusion_rules (Optional[BaseExclusionRules]): Rules deciding which nodes are skipped.
        base_directory (str): Prefix for entry names, empty for a flattened archive.
        follow_symlinks (bool): Whether symbolic links are followed.

    Example:
        >>> walker = TreeWalker("project", include_base_directory=True)  # doctest: +SKIP
        >>> [e.relative_path for e in walker.iterate_entries()]  # doctest: +SKIP
        ['a.txt', 'sub/b.txt', 'sub/c.txt']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        include_base_directory: bool = False,
        follow_symlinks: bool = False,
    ) -> None:
        self.root_path = resolve_path(root_path)
        self.exclusion_rules = exclusion_rules
        self.base_directory = os.path.basename(self.root_path) if include_base_directory else ""
        self.follow_symlinks = follow_symlinks

    def entry_name(self, relative_path: str) -> str:
        """Name of the archive entry for a file at ``relative_path``."""
        return archive_entry_name(relative_path, self.base_directory)

    def run(self, sink: ArchiveSink, directory_path: Optional[PathType] = None) -> int:
        """Stream every included file below ``directory_path`` into ``sink``.

        Args:
            sink: The archive sink receiving (source path, entry name) pairs.
            directory_path: Directory to start from. Defaults to the source root.
                Relative paths and entry names are always computed against the
                source root.

        Returns:
            Number of entries handed to the sink.

        Raises:
            OSError: If any directory listing or stat call fails.
        """
        count = 0
        for entry in self.iterate_entries(directory_path):
            sink.add_file(entry.absolute_path, self.entry_name(entry.relative_path))
            count += 1
        return count

    def iterate_entries(self, directory_path: Optional[PathType] = None) -> Iterator[TraversalEntry]:
        """Yield a TraversalEntry for each included regular file, in traversal order.

        Raises:
            OSError: If any directory listing or stat call fails.
        """
        start = resolve_path(directory_path) if directory_path is not None else self.root_path

        # Each stack frame holds the remaining children of one directory, reversed so
        # that pop() returns them in sorted order.
        stack: List[List[str]] = [self._list_children(start)]
        while stack:
            children = stack[-1]
            if not children:
                stack.pop()
                continue
            entry = self._classify(children.pop())

            if self._is_excluded(entry):
                logger.debug("Excluding %s", entry.relative_path)
                continue

            if entry.kind is EntryKind.FILE:
                yield entry
            elif entry.kind is EntryKind.DIRECTORY:
                stack.append(self._list_children(entry.absolute_path))
            else:
                logger.debug("Skipping %s: not a regular file or directory", entry.relative_path)

    def _list_children(self, directory: str) -> List[str]:
        return [os.path.join(directory, name) for name in sorted(os.listdir(directory), reverse=True)]

    def _classify(self, absolute_path: str) -> TraversalEntry:
        relative_path = to_posix(os.path.relpath(absolute_path, self.root_path))
        mode = (os.stat if self.follow_symlinks else os.lstat)(absolute_path).st_mode
        if stat.S_ISREG(mode):
            kind = EntryKind.FILE
        elif stat.S_ISDIR(mode):
            kind = EntryKind.DIRECTORY
        else:
            kind = EntryKind.OTHER
        return TraversalEntry(absolute_path, relative_path, kind)

    def _is_excluded(self, entry: TraversalEntry) -> bool:
        if self.exclusion_rules is None:
            return False
        if self.exclusion_rules.exclude(entry.relative_path):
            return True
        # Directory-only gitignore patterns ("build/") need the trailing slash
        return entry.kind is EntryKind.DIRECTORY and self.exclusion_rules.exclude(entry.relative_path + "/")
