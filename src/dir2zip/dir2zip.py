"""Directory to zip archive conversion.

This module provides the DirArchiver class, which sequences one archiving job:
removing any previous output, opening the archive sink, registering its observers,
walking the source tree into it, finalizing it and reporting the archive size.
"""

import logging
import os
from typing import Iterable, List

from dir2zip.archive_sink.base_sink import ArchiveSink
from dir2zip.archive_sink.zip_sink import DEFAULT_COMPRESSLEVEL, ZipArchiveSink
from dir2zip.exceptions import ArchiveWarning, InvalidSourceError
from dir2zip.exclusion_rules.base_rules import BaseExclusionRules
from dir2zip.exclusion_rules.composite_rules import CompositeExclusionRules
from dir2zip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2zip.exclusion_rules.path_rules import PathExclusionRules
from dir2zip.paths import to_posix
from dir2zip.size_format import format_size
from dir2zip.tree_walker import TreeWalker
from dir2zip.types import ArchiveJob, ArchiveResult, PathType

logger = logging.getLogger(__name__)


class DirArchiver:
    """Build a zip archive from the contents of a directory.

    Archiving always overwrites: an existing file at the destination is deleted before
    writing starts. Files are streamed into the archive as the tree is walked. A
    failure anywhere (traversal, writer error, or a writer warning other than a
    missing file) aborts the job, removes the partially written archive and re-raises
    the original exception.

    If the destination lies inside the source directory, it is excluded from the
    walk so the archive never contains itself.

    Attributes:
        job (ArchiveJob): The resolved, immutable job configuration.
        compresslevel (int): Deflate compression level used for the archive.

    Example:
        >>> archiver = DirArchiver("project", "dist/project.zip", True, ["sub/c.txt"])  # doctest: +SKIP
        >>> result = archiver.create_archive()  # doctest: +SKIP
        >>> result.human_size  # doctest: +SKIP
        '1.5 KB'

    Raises:
        InvalidSourceError: If the source directory does not exist or is not a directory.
    """

    def __init__(
        self,
        source_directory: PathType,
        destination_file: PathType,
        include_base_directory: bool = False,
        excluded_paths: Iterable[PathType] = (),
        *,
        follow_symlinks: bool = False,
        ignore_patterns: Iterable[str] = (),
        ignore_files: Iterable[PathType] = (),
        compresslevel: int = DEFAULT_COMPRESSLEVEL,
    ):
        """Initialize an archiving job.

        Args:
            source_directory: Directory whose contents are archived.
            destination_file: Path of the zip file to create.
            include_base_directory: If True, every entry is nested under the name of
                the source directory, so the archive unpacks into its own folder.
                If False, the archive unpacks into the current directory.
            excluded_paths: Paths relative to the source directory to leave out,
                matched exactly after normalization. Excluding a directory leaves
                out everything below it.
            follow_symlinks: Whether symbolic links are followed. Defaults to False,
                in which case links are skipped.
            ignore_patterns: Optional gitignore-style patterns excluded in addition
                to ``excluded_paths``.
            ignore_files: Optional files of gitignore-style patterns, applied like
                ``ignore_patterns``.
            compresslevel: Deflate compression level, 0-9. Defaults to 9.

        Raises:
            InvalidSourceError: If the source directory is missing or not a directory.
        """
        self.job = ArchiveJob.create(
            source_directory,
            destination_file,
            include_base_directory,
            excluded_paths,
            follow_symlinks=follow_symlinks,
            ignore_patterns=ignore_patterns,
            ignore_files=ignore_files,
        )
        if not os.path.isdir(self.job.source_root):
            raise InvalidSourceError(os.fspath(source_directory))
        self.compresslevel = compresslevel

        self._walker = TreeWalker(
            self.job.source_root,
            exclusion_rules=self._build_exclusion_rules(),
            include_base_directory=self.job.include_base_directory,
            follow_symlinks=self.job.follow_symlinks,
        )

    def _build_exclusion_rules(self) -> BaseExclusionRules:
        path_rules = PathExclusionRules(self.job.excluded_paths)

        if self._destination_in_source():
            destination = os.path.relpath(self.job.destination_path, self.job.source_root)
            logger.debug("Destination is inside the source tree, excluding %s", destination)
            path_rules.add_rule(to_posix(destination))

        if not (self.job.ignore_patterns or self.job.ignore_files):
            return path_rules
        pattern_rules = GitIgnoreExclusionRules(rules_files=self.job.ignore_files, patterns=self.job.ignore_patterns)
        return CompositeExclusionRules([path_rules, pattern_rules])

    def _destination_in_source(self) -> bool:
        try:
            return os.path.commonpath([self.job.source_root, self.job.destination_path]) == self.job.source_root
        except ValueError:
            # Paths on different drives
            return False

    @property
    def walker(self) -> TreeWalker:
        return self._walker

    def list_entries(self) -> List[str]:
        """Return the entry names the archive would contain, in archive order.

        Raises:
            OSError: If traversal fails.
        """
        return [self._walker.entry_name(entry.relative_path) for entry in self._walker.iterate_entries()]

    def create_sink(self) -> ArchiveSink:
        """Construct the archive sink bound to the destination."""
        return ZipArchiveSink(self.job.destination_path, compresslevel=self.compresslevel)

    def create_archive(self) -> ArchiveResult:
        """Write the archive, returning once the destination is completely written.

        Returns:
            ArchiveResult with the destination path, byte size and entry count.

        Raises:
            OSError: If reading the source tree or deleting the old archive fails.
            ArchiveWarning: If the writer reports a warning other than a missing file.
            ArchiveWriterError: If the writer fails.
            ValueError: If the compression level is out of range.
        """
        destination = self.job.destination_path
        sink = self.create_sink()

        if os.path.lexists(destination):
            logger.debug("Removing existing archive %s", destination)
            os.remove(destination)
        os.makedirs(os.path.dirname(destination), exist_ok=True)
        logger.info("Archiving %s into %s", self.job.source_root, destination)

        sink.on_warning(self._handle_warning)
        sink.on_error(self._handle_error)

        with sink:
            self._walker.run(sink)

        size = sink.bytes_written or 0
        logger.debug("Created %s of %s", destination, format_size(size))
        return ArchiveResult(destination, size, sink.entry_count)

    def _handle_warning(self, warning: ArchiveWarning) -> None:
        if warning.is_missing_file:
            logger.warning("Skipping missing file %s", warning.path)
            return
        raise warning

    def _handle_error(self, error: Exception) -> None:
        logger.debug("Archive writer failed: %s", error)
