"""Zip archive sink backed by the standard library zipfile module."""

import logging
import os
import zipfile
from typing import BinaryIO, Optional

from dir2zip.exceptions import ArchiveWarning, ArchiveWriterError
from dir2zip.types import PathType

from .base_sink import ArchiveSink

logger = logging.getLogger(__name__)

DEFAULT_COMPRESSLEVEL = 9


class ZipArchiveSink(ArchiveSink):
    """Archive sink writing a deflate-compressed zip file.

    Each entry is streamed from its source file into the archive as soon as it is
    added, so memory use does not grow with the size of the tree. Reading a source
    file that has disappeared produces an ``ENOENT`` :class:`ArchiveWarning`; any
    other ``OSError`` while reading a source produces a warning carrying that
    error's code. Failures of the zip writer itself or of the destination file are
    reported as :class:`ArchiveWriterError`.

    Attributes:
        destination (str): Path of the zip file being written.
        compresslevel (int): Deflate compression level, 0-9.

    Example:
        >>> import tempfile, os, zipfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     src = os.path.join(tmpdir, "a.txt")
        ...     with open(src, "w") as f:
        ...         _ = f.write("hello")
        ...     dest = os.path.join(tmpdir, "out.zip")
        ...     with ZipArchiveSink(dest) as sink:
        ...         sink.add_file(src, "a.txt")
        ...     zipfile.ZipFile(dest).namelist()
        ['a.txt']
    """

    def __init__(self, destination: PathType, compresslevel: int = DEFAULT_COMPRESSLEVEL) -> None:
        super().__init__()
        if not 0 <= compresslevel <= 9:
            raise ValueError(f"compresslevel must be between 0 and 9, got {compresslevel}")
        self.destination = os.fspath(destination)
        self.compresslevel = compresslevel
        self._stream: Optional[BinaryIO] = None
        self._zip: Optional[zipfile.ZipFile] = None

    def open(self) -> None:
        if self._zip is not None:
            raise ArchiveWriterError("Archive is already open", self.destination)
        try:
            self._stream = open(self.destination, "wb")
            self._zip = zipfile.ZipFile(
                self._stream, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=self.compresslevel
            )
        except OSError as e:
            self._close_stream()
            raise ArchiveWriterError(f"Cannot open {self.destination} for writing: {e}", self.destination) from e

    def add_file(self, source_path: str, entry_name: str) -> None:
        if self._zip is None:
            self.emit_error(ArchiveWriterError("Archive is not open", self.destination))
            return
        try:
            # ZipInfo.from_file stats the source before anything is written, so a
            # vanished file leaves no partial entry behind
            self._zip.write(source_path, arcname=entry_name)
        except OSError as e:
            if e.filename is not None and os.fspath(e.filename) == os.fspath(source_path):
                self.emit_warning(ArchiveWarning.from_os_error(e, source_path))
                return
            self._fail(f"Failed to write entry {entry_name}: {e}", e)
        except (zipfile.LargeZipFile, ValueError) as e:
            self._fail(f"Failed to write entry {entry_name}: {e}", e)
        else:
            self.entry_count += 1
            logger.debug("Added %s as %s", source_path, entry_name)

    def finalize(self) -> int:
        if self._zip is None or self._stream is None:
            raise ArchiveWriterError("Archive is not open", self.destination)
        try:
            self._zip.close()
            self._stream.flush()
            os.fsync(self._stream.fileno())
            size = self._stream.tell()
        except OSError as e:
            self._fail(f"Failed to finalize {self.destination}: {e}", e)
        finally:
            self._zip = None
            self._close_stream()
        self.bytes_written = size
        return size

    def abort(self) -> None:
        """Close the writer and remove the partially written destination."""
        zip_file, self._zip = self._zip, None
        if zip_file is not None:
            try:
                zip_file.close()
            except (OSError, ValueError) as e:
                logger.debug("Ignoring error while closing aborted archive: %s", e)
        self._close_stream()
        try:
            os.remove(self.destination)
        except FileNotFoundError:
            pass

    def _fail(self, message: str, cause: BaseException) -> None:
        error = ArchiveWriterError(message, self.destination)
        error.__cause__ = cause
        self.emit_error(error)

    def _close_stream(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None:
            stream.close()
