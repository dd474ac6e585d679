import errno
import os
from typing import Optional


class InvalidSourceError(ValueError):
    """
    Exception raised when the directory to archive does not exist or is not a directory.

    Attributes:
        path (str): The offending source path.

    Example:
        >>> error = InvalidSourceError("/no/such/dir")
        >>> str(error)
        "'/no/such/dir' is not a valid directory"
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"'{path}' is not a valid directory")


class ArchiveWarning(Exception):
    """
    Non-fatal condition reported by an archive sink while writing an entry.

    Warnings are classified by an ``errno`` code. A missing source file (``ENOENT``),
    typically one removed between traversal and writing, is logged and skipped by the
    archiver. Every other warning code is promoted to a fatal error by raising the
    warning itself.

    Attributes:
        code (int): The ``errno`` value describing the condition.
        path (Optional[str]): The source file the warning refers to.

    Example:
        >>> import errno
        >>> warning = ArchiveWarning(errno.ENOENT, "No such file", "/src/gone.txt")
        >>> warning.is_missing_file
        True
        >>> warning.code_name
        'ENOENT'
    """

    def __init__(self, code: int, message: str, path: Optional[str] = None) -> None:
        self.code = code
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)

    @property
    def is_missing_file(self) -> bool:
        return self.code == errno.ENOENT

    @property
    def is_permission_denied(self) -> bool:
        return self.code in (errno.EACCES, errno.EPERM)

    @property
    def code_name(self) -> str:
        return errno.errorcode.get(self.code, str(self.code))

    @classmethod
    def from_os_error(cls, error: OSError, path: Optional[str] = None) -> "ArchiveWarning":
        """Build a warning from an ``OSError`` raised while reading a source file.

        The original error is chained as ``__cause__``.
        """
        code = error.errno if error.errno is not None else errno.EIO
        message = error.strerror or os.strerror(code)
        warning = cls(code, message, path or error.filename)
        warning.__cause__ = error
        return warning


class ArchiveWriterError(Exception):
    """
    Fatal error raised by an archive sink.

    The original exception is chained as ``__cause__``.

    Attributes:
        path (Optional[str]): The source file or destination involved, if known.

    Example:
        >>> error = ArchiveWriterError("Archive is already finalized")
        >>> str(error)
        'Archive is already finalized'
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)
