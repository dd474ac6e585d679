"""Archive sink base class defining the interface for archive writers.

An archive sink is the capability the tree walker streams entries into. It hides the
container format and compression codec behind three operations: add a named entry
from a source file, finalize, and report how many bytes were written. Conditions met
while writing are delivered to registered observers instead of being lost.
"""

import types
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Type

from dir2zip.exceptions import ArchiveWarning

WarningHandler = Callable[[ArchiveWarning], None]
ErrorHandler = Callable[[Exception], None]


class ArchiveSink(ABC):
    """Abstract base class for archive writers.

    Lifecycle: :meth:`open`, any number of :meth:`add_file` calls, then either
    :meth:`finalize` (success) or :meth:`abort` (failure). Observers registered with
    :meth:`on_warning` and :meth:`on_error` must be in place before the first write.
    After a successful finalize, ``bytes_written`` holds the archive size and
    ``entry_count`` the number of stored entries.

    Warnings are passed to every warning handler; a handler raises to make the
    warning fatal. A warning emitted with no handler registered is raised. Errors are
    passed to every error handler and then always raised.

    Example:
        >>> class ListSink(ArchiveSink):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.entries = []
        ...     def open(self):
        ...         pass
        ...     def add_file(self, source_path, entry_name):
        ...         self.entries.append(entry_name)
        ...     def finalize(self):
        ...         return len(self.entries)
        ...     def abort(self):
        ...         self.entries.clear()
        >>> with ListSink() as sink:
        ...     sink.add_file("/src/a.txt", "a.txt")
        >>> sink.entries
        ['a.txt']
    """

    def __init__(self) -> None:
        self.entry_count = 0
        self.bytes_written: Optional[int] = None
        self._warning_handlers: List[WarningHandler] = []
        self._error_handlers: List[ErrorHandler] = []

    def on_warning(self, handler: WarningHandler) -> None:
        """Register a callable invoked with each :class:`ArchiveWarning`."""
        self._warning_handlers.append(handler)

    def on_error(self, handler: ErrorHandler) -> None:
        """Register a callable invoked with each fatal writer error before it is raised."""
        self._error_handlers.append(handler)

    def emit_warning(self, warning: ArchiveWarning) -> None:
        if not self._warning_handlers:
            raise warning
        for handler in self._warning_handlers:
            handler(warning)

    def emit_error(self, error: Exception) -> None:
        for handler in self._error_handlers:
            handler(error)
        raise error

    @abstractmethod
    def open(self) -> None:
        """Open the destination and prepare the writer."""
        pass

    @abstractmethod
    def add_file(self, source_path: str, entry_name: str) -> None:
        """Store the file at ``source_path`` under ``entry_name``.

        Args:
            source_path: Absolute path of the file to read.
            entry_name: Forward-slash name of the entry inside the archive.
        """
        pass

    @abstractmethod
    def finalize(self) -> int:
        """Finish the archive, flush and close the destination.

        Returns:
            int: Total number of bytes written to the destination.
        """
        pass

    @abstractmethod
    def abort(self) -> None:
        """Release resources after a failure and discard any partial output."""
        pass

    def __enter__(self) -> "ArchiveSink":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Finalize on success, abort on failure.

        If finalizing fails the archive is aborted and the error is raised. If the
        with block raised, the sink is aborted and the original exception propagates.
        """
        if exc_type is None:
            if self.bytes_written is not None:
                return
            try:
                self.finalize()
            except BaseException:
                self.abort()
                raise
        else:
            self.abort()

